"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import HomeboardConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = "homeboard.json"

# Global cache to avoid reloading config on every request
_config_cache: HomeboardConfig | None = None

# Env var -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "GOODREADS_KEY": ("goodreads", "key"),
    "GOODREADS_SECRET": ("goodreads", "secret"),
    "GOODREADS_USER_ID": ("goodreads", "user_id"),
    "ANKI_CONNECT_HOST": ("anki", "host"),
    "HOMEBOARD_DATA_DIR": ("content", "data_dir"),
}


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """Path to ~/.config/homeboard/config.json (or XDG equivalent)."""
    return get_xdg_config_home() / "homeboard" / "config.json"


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        project_dir: Project directory (defaults to current directory)

    Returns:
        Path to homeboard.json in the project directory
    """
    if project_dir is None:
        project_dir = Path.cwd()
    return project_dir / PROJECT_CONFIG_NAME


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`; nested
    dicts are merged, not replaced.

    Example:
        >>> deep_merge({"a": 1, "b": {"x": 10}}, {"b": {"y": 20}})
        {'a': 1, 'b': {'x': 10, 'y': 20}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON object from disk, returning None if missing or invalid.

    The config system is resilient: a broken file is logged and skipped.
    """
    if not path.exists():
        return None

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config at %s: top level must be an object", path)
        return None
    return data


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence. Empty values are ignored so that
    an unset-but-exported variable does not blank out a configured value.

    Supported env vars:
        GOODREADS_KEY, GOODREADS_SECRET, GOODREADS_USER_ID,
        ANKI_CONNECT_HOST, HOMEBOARD_DATA_DIR
    """
    result = {k: (dict(v) if isinstance(v, dict) else v) for k, v in config_dict.items()}

    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if not value:
            continue
        section_dict = result.setdefault(section, {})
        section_dict[key] = value

    return result


def resolve_paths(config: HomeboardConfig, base_dir: Path) -> HomeboardConfig:
    """Anchor relative content and output paths at base_dir."""
    if not config.content.data_dir.is_absolute():
        config.content.data_dir = base_dir / config.content.data_dir
    if not config.site.output_dir.is_absolute():
        config.site.output_dir = base_dir / config.site.output_dir
    return config


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> HomeboardConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables
        2. Project config (homeboard.json)
        3. User config (~/.config/homeboard/config.json)
        4. Model defaults

    Args:
        project_dir: Directory holding homeboard.json (defaults to cwd)
        use_cache: If True, return cached config from a previous load

    Returns:
        Validated HomeboardConfig with absolute content paths

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    if project_dir is None:
        project_dir = Path.cwd()

    merged: dict[str, Any] = {}

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    config = resolve_paths(HomeboardConfig(**merged), project_dir.resolve())
    logger.debug("Loaded config for %s", project_dir)

    _config_cache = config
    return config


def clear_cache() -> None:
    """Forget the cached config (used by tests and after `init`)."""
    global _config_cache
    _config_cache = None
