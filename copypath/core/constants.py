"""Core constants and paths for copypath.

Single source of truth for config locations. Modules import from here
instead of hardcoding ``Path.home() / ".copypath"``.
"""

from pathlib import Path

CONFIG_DIR_NAME = ".copypath"
CONFIG_FILE_NAME = "config.json"

# Rendering contract shared by the clipboard and folder copies
ENTRY_SEPARATOR = "\n\n---\n\n"

# Characters that may not appear in a folder name
INVALID_FOLDER_NAME_CHARS: frozenset[str] = frozenset('/\\:*?"<>|')
MAX_FOLDER_NAME_LENGTH = 100


def get_config_dir() -> Path:
    """Get ~/.copypath (global config directory)."""
    return Path.home() / CONFIG_DIR_NAME


def get_local_config_path(cwd: Path) -> Path:
    """Get project-local config file path for ``cwd``."""
    return cwd / CONFIG_DIR_NAME / CONFIG_FILE_NAME
