"""Read-only JSON config helpers.

Loads browse/output preferences and the UI theme name. All access is
defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "iconpick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_default_browse() -> bool:
    """Return whether to open the browser without ``--browse``."""
    return _load_bool("default_browse")


def load_copy_to_clipboard() -> bool:
    return _load_bool("copy_to_clipboard")


def load_custom_output() -> str | None:
    """Load the output template applied to a selected icon, if any."""
    value = load_config().get("custom_output")
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None
