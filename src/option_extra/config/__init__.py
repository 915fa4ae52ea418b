"""Configuration management using pydantic-settings."""

from .log import ROOT_LOGGER, configure_logging
from .settings import LoggingSettings, OptionExtraSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "OptionExtraSettings",
    "ROOT_LOGGER",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
