"""Runtime support: persisted preferences."""

from __future__ import annotations

from .config import PanelConfig, load_config, load_panel_config, save_config, save_panel_config

__all__ = [
    "PanelConfig",
    "load_config",
    "load_panel_config",
    "save_config",
    "save_panel_config",
]
