"""Centralized configuration management using pydantic-settings.

The kernel itself takes no configuration; settings here cover the ambient
concerns (logging) of applications that embed it.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for the eventric namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from eventric.config import get_settings

        settings = get_settings()
        level = settings.logging.log_level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
