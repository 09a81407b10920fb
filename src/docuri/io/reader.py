"""
File Readers.

Turns a document URI into its byte content without blocking the event loop.
The blocking open/read pair runs in an executor thread; the coroutine only
awaits the result and enforces the size cap.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor
from typing import Optional

from ..config import MAX_SIZE
from ..core.errors import IoError, OpenFailedError, SizeLimitExceededError
from ..core.uri import Uri

logger = logging.getLogger(__name__)


class FileReader(ABC):
    """Interface for loading document content by URI."""

    @abstractmethod
    async def read(self, uri: Uri) -> bytes:
        """
        Load the full content of the document at ``uri``.

        Raises:
            IoError: If the content cannot be loaded.
        """
        pass


def _read_capped(path: str, limit: int, uri: Optional[str] = None) -> bytes:
    """
    Open ``path`` and issue a single read of at most ``limit`` bytes.

    Runs in a worker thread. The handle never escapes this function, so it is
    closed even if the awaiting coroutine was cancelled in the meantime.
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise OpenFailedError(
            f"Can't open file {uri or path}: {e.strerror or e}", uri=uri, path=path
        ) from e

    with handle:
        try:
            return handle.read(limit)
        except OSError as e:
            raise IoError(
                f"Can't read file {uri or path}: {e.strerror or e}", uri=uri
            ) from e


class LocalFileReader(FileReader):
    """
    Reads documents from the local filesystem.

    Content larger than ``MAX_SIZE`` is rejected rather than truncated.

    Attributes:
        executor (Optional[Executor]): Pool for the blocking I/O. ``None``
            uses the running loop's default executor.
    """

    MAX_SIZE = MAX_SIZE

    def __init__(self, executor: Optional[Executor] = None):
        self.executor = executor

    async def read(self, uri: Uri) -> bytes:
        """
        Read the document at ``uri``.

        Args:
            uri: A ``file`` or schemeless URI.

        Returns:
            bytes: The complete content, at most ``MAX_SIZE`` bytes.

        Raises:
            UnsupportedUriError: If the URI has no filesystem path.
            OpenFailedError: If the file cannot be opened.
            IoError: If reading the opened file fails.
            SizeLimitExceededError: If the file is larger than ``MAX_SIZE``.
        """
        # Unsupported URIs fail here, before any I/O
        path = uri.get_filesystem_path()

        logger.debug(f"Reading {path}")

        loop = asyncio.get_running_loop()
        content = await loop.run_in_executor(
            self.executor, _read_capped, path, self.MAX_SIZE + 1, str(uri)
        )

        if len(content) > self.MAX_SIZE:
            logger.warning(f"File size limit exceeded for {uri} ({self.MAX_SIZE} bytes)")
            raise SizeLimitExceededError(
                f"File size limit exceeded for {uri}",
                uri=str(uri),
                limit=self.MAX_SIZE,
            )

        logger.debug(f"Read {len(content)} bytes from {path}")
        return content
