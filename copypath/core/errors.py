"""Typed exception hierarchy for copypath."""

from __future__ import annotations

from enum import Enum


class CopyPathError(Exception):
    """Base class for all copypath errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ErrorKind(Enum):
    """Closed set of failure categories for clipboard and folder operations.

    Callers branch on the kind instead of matching message text.
    """

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    IO_ALL_FAILED = "io_all_failed"


class OperationError(CopyPathError):
    """Raised when a clipboard or folder operation cannot be performed.

    Subclasses pin ``kind``; the message is the human-readable text shown
    to the user at the command boundary.
    """

    kind: ErrorKind


class ValidationError(OperationError):
    """Invalid input: bad folder name, missing argument, malformed number."""

    kind = ErrorKind.VALIDATION


class NotFoundError(OperationError):
    """Targeted folder or file-in-folder does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(OperationError):
    """Duplicate folder name or duplicate folder membership."""

    kind = ErrorKind.CONFLICT


class NothingReadableError(OperationError):
    """Every file of a batch copy was unreadable."""

    kind = ErrorKind.IO_ALL_FAILED


class ConfigError(CopyPathError):
    """Raised for configuration issues (invalid JSON, validation failure)."""
