"""Configuration package."""

from crypto_monitor.config.settings import (
    Settings,
    get_settings,
    set_settings,
    reset_settings,
    get_default_data_dir,
)

__all__ = [
    "Settings",
    "get_settings",
    "set_settings",
    "reset_settings",
    "get_default_data_dir",
]
