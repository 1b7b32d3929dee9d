"""Core types, errors and helpers shared by the copypath components."""

from copypath.core.errors import (
    ConfigError,
    ConflictError,
    CopyPathError,
    ErrorKind,
    NotFoundError,
    NothingReadableError,
    OperationError,
    ValidationError,
)
from copypath.core.files import FileReader, FilesystemReader
from copypath.core.identifiers import FolderIdGenerator

__all__ = [
    # Errors
    "ConfigError",
    "ConflictError",
    "CopyPathError",
    "ErrorKind",
    "NotFoundError",
    "NothingReadableError",
    "OperationError",
    "ValidationError",
    # Collaborators
    "FileReader",
    "FilesystemReader",
    "FolderIdGenerator",
]
