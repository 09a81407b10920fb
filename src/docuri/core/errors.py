"""
Error hierarchy for docuri.

URI errors describe strings that cannot be parsed or mapped to a path.
I/O errors describe failures of the file reader. Callers decide about
retries; nothing in the core recovers from these silently.
"""

from typing import Optional


class DocUriError(Exception):
    """Base class for all docuri errors."""

    def __init__(self, message: str, uri: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.uri = uri


class ConfigError(DocUriError):
    """Settings file could not be loaded."""

    pass


class UriError(DocUriError):
    """Base class for URI-level errors."""

    pass


class MalformedUriError(UriError):
    """String does not match the generic URI grammar."""

    pass


class UnsupportedUriError(UriError):
    """Scheme/authority combination cannot be mapped to a filesystem path."""

    pass


class IoError(DocUriError):
    """Base class for file reader errors."""

    pass


class OpenFailedError(IoError):
    """Opening the resolved path failed."""

    def __init__(self, message: str, uri: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message, uri=uri)
        self.path = path


class SizeLimitExceededError(IoError):
    """File content is larger than the reader accepts."""

    def __init__(self, message: str, uri: Optional[str] = None, limit: int = 0):
        super().__init__(message, uri=uri)
        self.limit = limit
