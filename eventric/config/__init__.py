"""Configuration module for eventric.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from eventric.config import get_settings

    settings = get_settings()
    log_level = settings.logging.log_level
"""

from eventric.config.settings import (
    LoggingSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
