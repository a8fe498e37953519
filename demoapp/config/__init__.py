"""Configuration package for runtime settings and startup validation."""

from .settings import DEFAULT_DISPLAY_VALUE, AppSettings, SettingsLoadError, config_load_settings

__all__ = ["DEFAULT_DISPLAY_VALUE", "AppSettings", "SettingsLoadError", "config_load_settings"]
