"""Settings storage for console menu text."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from menutree.logging import LoggerFactory

SETTINGS_PATH = Path(
    os.environ.get(
        "MENUTREE_SETTINGS_PATH",
        Path.home() / ".config" / "menutree" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_CHOICE_PROMPT = "choice: "
DEFAULT_PAUSE_PROMPT = "press any key to continue..."
DEFAULT_INVALID_PROMPT = "invalid input!"
DEFAULT_LOCATION_PROMPT = "Location: "
DEFAULT_SEPARATOR = " >> "

DEFAULT_SETTINGS: dict[str, Any] = {
    "choice_prompt": DEFAULT_CHOICE_PROMPT,
    "pause_prompt": DEFAULT_PAUSE_PROMPT,
    "invalid_prompt": DEFAULT_INVALID_PROMPT,
    "location_prompt": DEFAULT_LOCATION_PROMPT,
    "breadcrumb_separator": DEFAULT_SEPARATOR,
    "clear_screen": False,
}

log = LoggerFactory.for_system()


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_SETTINGS))


settings_store = SettingsStore()


def load_settings(path: Path | None = None) -> None:
    path = path or SETTINGS_PATH
    settings_store.values = dict(DEFAULT_SETTINGS)
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as error:
        log.warning(f"Ignoring unreadable settings file {path}: {error}")
        return
    if isinstance(data, dict):
        settings_store.values.update(data)
    else:
        log.warning(f"Ignoring settings file {path}: expected a JSON object")


def save_settings(path: Path | None = None) -> None:
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(settings_store.values, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any, path: Path | None = None) -> None:
    settings_store.values[key] = value
    save_settings(path)


def get_bool(key: str, default: bool = False) -> bool:
    return bool(get_setting(key, default))


def get_text(key: str) -> str:
    value = get_setting(key)
    if isinstance(value, str):
        return value
    return DEFAULT_SETTINGS[key]
