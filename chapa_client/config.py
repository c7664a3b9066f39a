"""
Configuration Settings.

This module defines the client configuration using Pydantic's BaseSettings.
It loads all configuration from environment variables and a .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.chapa.co/v1"
DEFAULT_TIMEOUT = 30.0


class ChapaSettings(BaseSettings):
    """
    Chapa client settings model.

    All properties are bound from environment variables and .env file.
    Fields may also be passed by name, e.g. ``ChapaSettings(api_key="...")``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    api_key: Optional[str] = Field(
        default=None,
        alias="CHAPA_API_KEY",
        description="Chapa secret key sent as the Bearer token",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        alias="CHAPA_BASE_URL",
        description="Base URL of the Chapa REST API, including the version prefix",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        alias="CHAPA_TIMEOUT",
        description="HTTP timeout in seconds applied to every request",
    )
    log_level: str = Field(
        default="INFO",
        alias="CHAPA_LOG_LEVEL",
        description="Log level for the chapa_client loggers (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


_settings_instance: Optional[ChapaSettings] = None


def get_settings() -> ChapaSettings:
    """Return the process-wide settings, creating them on first use."""
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = ChapaSettings()
    return _settings_instance
