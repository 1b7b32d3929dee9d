"""Configuration loading and validation."""

from copypath.config.loader import load_config
from copypath.config.schema import (
    ClipboardConfig,
    Config,
    FolderConfig,
    LoggingConfig,
)

__all__ = [
    "ClipboardConfig",
    "Config",
    "FolderConfig",
    "LoggingConfig",
    "load_config",
]
