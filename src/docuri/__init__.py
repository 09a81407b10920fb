"""
docuri: document URIs and bounded file loading for editor backends.
"""

from .config import MAX_SIZE
from .core.errors import (
    DocUriError,
    IoError,
    MalformedUriError,
    OpenFailedError,
    SizeLimitExceededError,
    UnsupportedUriError,
    UriError,
)
from .core.uri import Uri
from .io.reader import FileReader, LocalFileReader

__version__ = "0.1.0"

__all__ = [
    "MAX_SIZE",
    "DocUriError",
    "FileReader",
    "IoError",
    "LocalFileReader",
    "MalformedUriError",
    "OpenFailedError",
    "SizeLimitExceededError",
    "UnsupportedUriError",
    "Uri",
    "UriError",
]
