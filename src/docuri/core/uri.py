"""
URI Value Type.

Immutable representation of a document URI with parsing, serialization,
normalization and filesystem path mapping.

Components are split by the generic grammar:

    [scheme ":"] ["//" authority] path ["?" query] ["#" fragment]

Authority, path and fragment are percent-decoded on parse and re-encoded on
serialization. The query is kept exactly as received; only a literal ``#`` is
escaped when serializing so the fragment boundary survives.

Two URIs are equal when their normalized forms are equal, so ``file:///a``,
``file:///a/`` and ``file://localhost/a`` all identify the same document and
hash to the same dict slot.
"""

import dataclasses
import os
import re
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import quote, unquote

from .errors import MalformedUriError, UnsupportedUriError
from .platform import is_windows

URI_REGEX = re.compile(
    r"^(?:([a-zA-Z][-a-zA-Z0-9+.]*):)?"
    r"(?://([^/?#]*))?"
    r"([^?#]*)"
    r"(?:\?([^#]*))?"
    r"(?:#(.*))?\Z",
    re.DOTALL,
)

FILE_SCHEME = "file"
LOCALHOST = "localhost"

# Schemes that map onto the local filesystem (None means schemeless)
FILESYSTEM_SCHEMES = (FILE_SCHEME, None)


def _encode(component: str) -> str:
    # RFC 3986 raw encoding: only unreserved characters pass through.
    # Undecodable filename bytes (surrogate escapes) are emitted as-is.
    return quote(component.encode("utf-8", "surrogateescape"), safe="")


def _encode_parts(component: str, delimiter: str) -> str:
    return delimiter.join(_encode(part) for part in component.split(delimiter))


def _decode_component(component: Optional[str], decode: bool = True) -> Optional[str]:
    if not component:
        return None
    if decode:
        return unquote(component, errors="surrogateescape")
    return component


@dataclass(frozen=True, eq=False)
class Uri:
    """
    Immutable URI value.

    Build instances with :meth:`from_string` or :meth:`from_filesystem_path`.
    Empty components are stored as ``None``.
    """

    scheme: Optional[str] = None
    authority: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            if getattr(self, f.name) == "":
                object.__setattr__(self, f.name, None)

    # --- Factories ---

    @classmethod
    def from_string(cls, string: str) -> "Uri":
        """
        Parse a URI string.

        Args:
            string: The URI, e.g. ``file:///home/user/doc.txt`` or a bare path.

        Returns:
            Uri: The parsed value.

        Raises:
            MalformedUriError: If the string does not match the URI grammar.
        """
        if not isinstance(string, str):
            raise MalformedUriError(f"Invalid URI: {string!r}")

        match = URI_REGEX.match(string)
        if match is None:
            raise MalformedUriError(f"Invalid URI: {string}", uri=string)

        scheme, authority, path, query, fragment = match.groups()

        return cls(
            scheme=scheme or None,
            authority=_decode_component(authority),
            path=_decode_component(path),
            query=_decode_component(query, decode=False),
            fragment=_decode_component(fragment),
        )

    @classmethod
    def from_filesystem_path(
        cls, path: Union[str, os.PathLike], windows: Optional[bool] = None
    ) -> "Uri":
        """
        Build a ``file`` URI from an absolute filesystem path.

        Args:
            path: Absolute path, e.g. ``/home/user/doc.txt`` or ``C:\\doc.txt``.
            windows: Force Windows (True) or POSIX (False) conventions.

        Returns:
            Uri: A URI with scheme ``file`` and the path as its path component.
        """
        path = os.fspath(path)

        if is_windows(windows):
            path = path.replace("\\", "/")

        if not path.startswith("/"):
            path = "/" + path

        return cls(scheme=FILE_SCHEME, path=path)

    # --- Serialization ---

    def serialize(self) -> str:
        """Reconstruct the URI string, percent-encoding each component."""
        result = ""

        if self.scheme is not None:
            result += self.scheme + ":"

        if self.authority is not None or self.scheme == FILE_SCHEME:
            result += "//"

        if self.authority is not None:
            result += _encode_parts(self.authority, ":")

        if self.path is not None:
            result += _encode_parts(self.path, "/")

        if self.query is not None:
            result += "?" + self.query.replace("#", "%23")

        if self.fragment is not None:
            result += "#" + _encode(self.fragment)

        return result

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Uri({self.serialize()!r})"

    def replace(self, **components: Optional[str]) -> "Uri":
        """Return a copy with the given components substituted."""
        return dataclasses.replace(self, **components)

    # --- Filesystem mapping ---

    def is_filesystem(self) -> bool:
        """True if the scheme is ``file`` or absent."""
        return self.scheme in FILESYSTEM_SCHEMES

    def get_filesystem_path(self, windows: Optional[bool] = None) -> str:
        """
        Map the URI to a local filesystem path.

        Args:
            windows: Force Windows (True) or POSIX (False) conventions.

        Returns:
            str: The path. On Windows the leading slash is dropped and
            separators become backslashes (``/C:/a`` -> ``C:\\a``).

        Raises:
            UnsupportedUriError: If the scheme is not ``file`` (or absent), or
                the authority names a host other than ``localhost``.
        """
        if not self.is_filesystem():
            raise UnsupportedUriError("Not a file URI", uri=self.serialize())

        if (self.authority or "").lower() not in ("", LOCALHOST):
            raise UnsupportedUriError(
                f"Unsupported authority in a file URI: {self.authority}",
                uri=self.serialize(),
            )

        if is_windows(windows):
            path = self.path or ""
            if path.startswith("/"):
                path = path[1:]
            return path.replace("/", "\\")

        return self.path if self.path is not None else "/"

    # --- Normalization & comparison ---

    def get_normalized(self, windows: Optional[bool] = None) -> str:
        """
        Return the canonical string form, suitable as a dict key.

        Only ``file`` URIs are canonicalized: a ``localhost`` authority is
        dropped, trailing slashes are stripped, and on Windows the path is
        lowercased. Everything else serializes unchanged.
        """
        if self.scheme != FILE_SCHEME:
            return self.serialize()

        authority = self.authority
        if authority is not None and authority.lower() == LOCALHOST:
            authority = None

        if self.path is not None:
            path = self.path.rstrip("/")
        else:
            path = "/"

        if is_windows(windows):
            path = path.lower()

        return self.replace(authority=authority, path=path).serialize()

    def get_normalized_glob(self, windows: Optional[bool] = None) -> str:
        """Normalized form with percent-encoded ``*`` turned back into wildcards."""
        normalized = self.get_normalized(windows)
        return normalized.replace("%2a", "*").replace("%2A", "*")

    def equals(self, other: "Uri", windows: Optional[bool] = None) -> bool:
        """Compare by normalized form."""
        return self.get_normalized(windows) == other.get_normalized(windows)

    def is_parent_of(self, other: "Uri", windows: Optional[bool] = None) -> bool:
        """
        Check whether ``other`` lies strictly below this URI.

        The parent must match whole path segments: ``file:///a`` contains
        ``file:///a/b`` but neither ``file:///ab`` nor itself. URIs outside the
        filesystem fall back to plain equality.
        """
        if not self.is_filesystem() or not other.is_filesystem():
            return self.equals(other, windows)

        parent = self.get_normalized(windows) + "/"
        return other.get_normalized(windows).startswith(parent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Uri):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.get_normalized())
