"""Persistent JSON config helpers.

Stores the default flattening mode and root display name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "pathtree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


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


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config directory never
    breaks tree construction.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_flatten_empty_directories() -> bool:
    """Return the persisted flattening preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("flatten_empty_directories")
    return value if isinstance(value, bool) else False


def save_flatten_empty_directories(flatten: bool) -> None:
    config = load_config()
    config["flatten_empty_directories"] = bool(flatten)
    save_config(config)


def load_root_name() -> str | None:
    """Load persisted root display name, returning ``None`` when unset/invalid."""
    value = load_config().get("root_name")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_root_name(root_name: str) -> None:
    """Persist the root display name; blank names are ignored."""
    stripped = str(root_name).strip()
    if not stripped:
        return
    config = load_config()
    config["root_name"] = stripped
    save_config(config)
