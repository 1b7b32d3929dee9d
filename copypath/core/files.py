"""Filesystem collaborator used by the batch copy operations.

Both the clipboard aggregator and the folder registry read file contents
through a ``FileReader`` so tests and host integrations can substitute
their own source of text.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Files larger than this are treated as unreadable by default
DEFAULT_MAX_FILE_BYTES = 1 * 1024 * 1024  # 1 MB
DEFAULT_ENCODING = "utf-8"


class FileReader(Protocol):
    """Protocol for reading a file's text.

    Implementations return the decoded text, or None when the file cannot
    be read. They must not raise for ordinary I/O failures; batch copies
    skip unreadable paths and keep going.

    Example:
        def read(path: str) -> str | None:
            return buffers.get(path)
    """

    def __call__(self, path: str) -> str | None:
        ...


class FilesystemReader:
    """Reads files from the local filesystem.

    Missing files, permission errors, undecodable content and files over
    ``max_bytes`` all yield None.
    """

    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        max_bytes: int = DEFAULT_MAX_FILE_BYTES,
    ) -> None:
        self._encoding = encoding
        self._max_bytes = max_bytes

    def __call__(self, path: str) -> str | None:
        file_path = Path(path)
        try:
            size = file_path.stat().st_size
            if size > self._max_bytes:
                logger.debug(
                    "Skipping %s: %s bytes exceeds limit of %s", path, size, self._max_bytes
                )
                return None
            return file_path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable file %s: %s", path, e)
            return None
