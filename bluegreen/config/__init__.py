"""Configuration package for runtime settings, logging and startup validation."""

from .log_setup import ACCESS_LOGGER_NAME, SERVER_LOGGER_NAME, config_configure_logging
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "ACCESS_LOGGER_NAME",
    "SERVER_LOGGER_NAME",
    "AppSettings",
    "SettingsLoadError",
    "config_configure_logging",
    "config_load_settings",
]
