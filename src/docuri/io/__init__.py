"""
Document content readers.

Provides the FileReader interface and its local filesystem implementation:
- LocalFileReader: capped, non-blocking reads of file URIs
"""

from .reader import FileReader, LocalFileReader

__all__ = ["FileReader", "LocalFileReader"]
