"""Persistent JSON config helpers.

Stores listing defaults: hidden-file preference, folder icons, name length
budget, suffix colors, and theme name. All access is defensive: malformed or
missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "zebrals"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger("zebrals.config")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring config at %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference."""
    return _load_bool("show_hidden")


def load_icons() -> bool:
    """Return persisted folder-icon preference."""
    return _load_bool("icons")


def load_max_name_length() -> int:
    """Return persisted name budget; booleans and negatives become ``0``."""
    value = load_config().get("max_name_length")
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def load_file_colors() -> dict[str, str]:
    """Load the suffix-to-color mapping, dropping non-string pairs."""
    value = load_config().get("file_colors")
    if not isinstance(value, dict):
        return {}
    return {
        suffix: color
        for suffix, color in value.items()
        if isinstance(suffix, str) and isinstance(color, str) and color
    }


def load_theme_name() -> str | None:
    """Load persisted theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
