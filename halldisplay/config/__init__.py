"""Configuration: layout constants, panel description and runtime settings."""

from .settings import (
    HallDisplaySettings,
    LayoutConfig,
    PanelSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "HallDisplaySettings",
    "LayoutConfig",
    "PanelSettings",
    "get_settings",
    "reset_settings",
]
