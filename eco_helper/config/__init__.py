"""Configuration package."""

from eco_helper.config.settings import (
    AppSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
