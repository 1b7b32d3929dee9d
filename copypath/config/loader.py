"""Configuration loading with fail-fast behavior and layered merging.

Layers, later overriding earlier:
1. Global user config (~/.copypath/config.json)
2. Ancestor directories (up to ``ancestor_depth`` levels above cwd)
3. Project local config (cwd/.copypath/config.json)

Every layer is a JSON object. Nested objects merge key by key; any other
value, lists included, replaces what an earlier layer set.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from copypath.config.schema import Config
from copypath.core.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    get_config_dir,
    get_local_config_path,
)
from copypath.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ANCESTOR_DEPTH = 2


def _read_json(path: Path) -> dict[str, Any]:
    """Parse ``path`` as a JSON object. A blank file counts as ``{}``.

    Raises:
        ConfigError: If the file can't be read, isn't JSON, or isn't an object.
    """
    try:
        # utf-8-sig tolerates the BOM some Windows editors write
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a JSON object, got {type(data).__name__}"
        )
    return data


def _read_layer(path: Path) -> dict[str, Any] | None:
    """Read an optional layer; None when the file doesn't exist."""
    if not path.is_file():
        logger.debug("No config layer at %s", path)
        return None
    logger.debug("Reading config layer %s", path)
    return _read_json(path)


def _merge(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Overlay ``layer`` on ``base`` without mutating either."""
    merged = dict(base)
    for key, value in layer.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def _ancestor_config_files(cwd: Path, depth: int, skip_dir: Path) -> list[Path]:
    """Config files in the ``depth`` directories above ``cwd``, furthest first.

    ``skip_dir`` (the global config dir) is never returned as an ancestor so
    a project under the home directory doesn't load the global layer twice.
    """
    skip = skip_dir.resolve()
    found: list[Path] = []
    for parent in cwd.resolve().parents[:depth]:
        config_dir = parent / CONFIG_DIR_NAME
        if config_dir.resolve() == skip:
            continue
        config_file = config_dir / CONFIG_FILE_NAME
        if config_file.is_file():
            found.append(config_file)
    found.reverse()
    return found


def load_config(
    path: Path | None = None,
    cwd: Path | None = None,
    global_dir: Path | None = None,
) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for ancestor/local lookup. Defaults to Path.cwd().
        global_dir: Global config directory override (for testing).

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file contains invalid JSON or merged config
            fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    global_dir = global_dir or get_config_dir()
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    global_config = global_dir / CONFIG_FILE_NAME
    global_data = _read_layer(global_config)
    if global_data:
        merged = _merge(merged, global_data)
        loaded_from.append(global_config)

    # Local config may override how far up to look for ancestors
    local_config = get_local_config_path(effective_cwd)
    local_data = _read_layer(local_config)
    ancestor_depth = (local_data or {}).get(
        "ancestor_depth", merged.get("ancestor_depth", DEFAULT_ANCESTOR_DEPTH)
    )
    if not isinstance(ancestor_depth, int):
        raise ConfigError(f"ancestor_depth must be an integer, got {ancestor_depth!r}")

    for ancestor_config in _ancestor_config_files(effective_cwd, ancestor_depth, global_dir):
        ancestor_data = _read_layer(ancestor_config)
        if ancestor_data:
            merged = _merge(merged, ancestor_data)
            loaded_from.append(ancestor_config)

    if local_data:
        merged = _merge(merged, local_data)
        loaded_from.append(local_config)

    if loaded_from:
        logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    else:
        logger.debug("No config files found, using defaults")
        return Config()

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e


def _load_from_path(path: Path) -> Config:
    """Load and validate config from a specific path.

    Raises:
        ConfigError: If file doesn't exist, contains invalid JSON, or fails validation.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    data = _read_json(path)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e
