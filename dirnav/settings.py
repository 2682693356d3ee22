"""Persistent JSON settings for listings and formatting.

Stores time/size formatting preferences, the active column selection, id
resolution mode, hidden-file and sort preferences, and the CLI theme.
All access is defensive: malformed or missing settings fall back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .attributes import DEFAULT_TIME_FORMAT, ID_FORMAT_INTEGER, ID_FORMATS, SIZE_FLAVOR_BINARY, SIZE_FLAVORS
from .columns import DEFAULT_COLUMNS
from .entries import SORT_BY_NAME, SORT_ORDERS

logger = logging.getLogger(__name__)

APP_NAME = "dirnav"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class Settings:
    time_format: str = DEFAULT_TIME_FORMAT
    size_flavor: str = SIZE_FLAVOR_BINARY
    active_columns: tuple[str, ...] = DEFAULT_COLUMNS
    id_format: str = ID_FORMAT_INTEGER
    show_hidden: bool = True
    sort_order: str = SORT_BY_NAME
    theme: str = "default"

    def updated(self, **changes: object) -> Settings:
        """Return a copy with ``None``-valued changes ignored."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})


DEFAULT_SETTINGS = Settings()


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
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("cannot write config %s: %s", CONFIG_PATH, exc)


def _choice(value: object, choices: tuple[str, ...], default: str) -> str:
    return value if isinstance(value, str) and value in choices else default


def _nonempty_string(value: object, default: str) -> str:
    if not isinstance(value, str):
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _bool(value: object, default: bool) -> bool:
    """Only explicit booleans are accepted."""
    return value if isinstance(value, bool) else default


def _columns(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return DEFAULT_COLUMNS
    columns = tuple(item for item in value if isinstance(item, str) and item)
    return columns if columns else DEFAULT_COLUMNS


def settings_from_dict(data: dict[str, object]) -> Settings:
    """Validate a decoded config object field by field."""
    return Settings(
        time_format=_nonempty_string(data.get("time_format"), DEFAULT_SETTINGS.time_format),
        size_flavor=_choice(data.get("size_flavor"), SIZE_FLAVORS, DEFAULT_SETTINGS.size_flavor),
        active_columns=_columns(data.get("active_columns")),
        id_format=_choice(data.get("id_format"), ID_FORMATS, DEFAULT_SETTINGS.id_format),
        show_hidden=_bool(data.get("show_hidden"), DEFAULT_SETTINGS.show_hidden),
        sort_order=_choice(data.get("sort_order"), SORT_ORDERS, DEFAULT_SETTINGS.sort_order),
        theme=_nonempty_string(data.get("theme"), DEFAULT_SETTINGS.theme),
    )


def load_settings() -> Settings:
    return settings_from_dict(load_config())


def save_settings(settings: Settings) -> None:
    """Merge ``settings`` into the stored config, keeping unrelated keys."""
    config = load_config()
    serialized = asdict(settings)
    serialized["active_columns"] = list(settings.active_columns)
    config.update(serialized)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_SETTINGS",
    "Settings",
    "load_config",
    "save_config",
    "settings_from_dict",
    "load_settings",
    "save_settings",
]
