"""Pydantic models for copypath configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from copypath.core.constants import MAX_FOLDER_NAME_LENGTH
from copypath.core.files import DEFAULT_ENCODING, DEFAULT_MAX_FILE_BYTES

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ClipboardConfig(BaseModel):
    """Configuration for reading files into the clipboard and folder copies."""

    model_config = ConfigDict(extra="forbid")

    max_file_bytes: int = Field(
        default=DEFAULT_MAX_FILE_BYTES,
        ge=1024,
        le=64 * 1024 * 1024,
        description="Files larger than this are skipped as unreadable",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Text encoding used when reading files",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings Python doesn't know about."""
        import codecs

        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v!r}") from e
        return v


class FolderConfig(BaseModel):
    """Configuration for folder management."""

    model_config = ConfigDict(extra="forbid")

    max_name_length: int = Field(
        default=MAX_FOLDER_NAME_LENGTH,
        ge=1,
        le=1000,
        description="Longest name the validate_name pre-check accepts",
    )


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "WARNING"
    """Level for the copypath logger on stderr."""


class Config(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "clipboard": {"max_file_bytes": 2097152},
            "folders": {"max_name_length": 60},
            "logging": {"level": "INFO"}
        }
    """

    model_config = ConfigDict(extra="forbid")

    ancestor_depth: int = Field(default=2, ge=0, le=10)
    """How many parent directories to search for .copypath/config.json."""

    clipboard: ClipboardConfig = ClipboardConfig()
    folders: FolderConfig = FolderConfig()
    logging: LoggingConfig = LoggingConfig()
