"""Persistent JSON config helpers.

Stores per-user panel preferences. All access is defensive: malformed or
missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "pathtree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class PanelConfig:
    auto_expand_top_level: bool = False
    show_status_badges: bool = True


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring write failures."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_panel_config() -> PanelConfig:
    data = load_config()
    defaults = PanelConfig()
    return PanelConfig(
        auto_expand_top_level=_load_bool(data, "auto_expand_top_level", defaults.auto_expand_top_level),
        show_status_badges=_load_bool(data, "show_status_badges", defaults.show_status_badges),
    )


def save_panel_config(panel_config: PanelConfig) -> None:
    """Persist panel preferences, keeping unrelated keys intact."""
    config = load_config()
    config["auto_expand_top_level"] = bool(panel_config.auto_expand_top_level)
    config["show_status_badges"] = bool(panel_config.show_status_badges)
    save_config(config)
