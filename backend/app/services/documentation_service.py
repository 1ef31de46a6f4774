"""
Sycamore Backend — Documentation Service
==========================================

What:  Reads the API documentation text file for GET /api/docs.
Why:   Keeps file system access out of the route handler.
How:   Async read via aiofiles so a slow disk never blocks the event loop.
       Any failure becomes DocumentationNotFoundError tagged with a reason.

Failure classification:
    FileNotFoundError / IsADirectoryError / NotADirectoryError → NOT_FOUND
    PermissionError                                            → UNREADABLE
    any other OSError                                          → UNKNOWN

Bytes that are not valid UTF-8 are replaced with U+FFFD rather than failing
the read, so a present, readable file is always served.
"""

import logging
from pathlib import Path
from typing import Union

import aiofiles

from app.exceptions import DocumentationNotFoundError, DocumentationReadFailure

logger = logging.getLogger(__name__)


def classify_read_error(exc: Exception) -> DocumentationReadFailure:
    """Maps a read exception onto the tagged failure reason."""
    if isinstance(exc, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return DocumentationReadFailure.NOT_FOUND
    if isinstance(exc, PermissionError):
        return DocumentationReadFailure.UNREADABLE
    return DocumentationReadFailure.UNKNOWN


class DocumentationService:
    """
    Serves one documentation file.

    The path is kept as given; a relative path is resolved against the
    process working directory at read time, not at construction.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def read(self) -> str:
        """
        Return the file's full text.

        newline="" disables newline translation so the returned text matches
        the file's bytes decoded as UTF-8; errors="replace" turns invalid
        byte sequences into U+FFFD instead of failing.

        Raises:
            DocumentationNotFoundError: file missing or unreadable
        """
        try:
            async with aiofiles.open(
                self.path, mode="r", encoding="utf-8", errors="replace", newline=""
            ) as f:
                return await f.read()
        except OSError as e:
            raise DocumentationNotFoundError(
                reason=classify_read_error(e),
                context={"path": str(self.path), "error": type(e).__name__},
            ) from e
