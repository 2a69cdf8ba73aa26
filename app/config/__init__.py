"""Configuration package for runtime settings and startup validation."""

from .framework import config_build_installed_apps, config_build_middleware
from .logging import config_build_logging, config_configure_structlog
from .settings import AppSettings, SettingsLoadError, config_load_settings

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "config_build_installed_apps",
    "config_build_logging",
    "config_build_middleware",
    "config_configure_structlog",
    "config_load_settings",
]
