# src/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
Variables use the TASKLINE_ prefix, e.g. TASKLINE_LOG_LEVEL=DEBUG.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False  # Emit JSON lines instead of plain text

    # Date/time input formats (strptime), tried in order
    datetime_formats: list[str] = Field(
        default_factory=lambda: [
            "%Y-%m-%d %H%M",
            "%Y-%m-%d %H:%M",
            "%Y-%m-%d",
            "%d/%m/%Y %H%M",
            "%d/%m/%Y %H:%M",
            "%d/%m/%Y",
            "%b %d %Y %H:%M",
            "%b %d %Y",
        ]
    )

    model_config = SettingsConfigDict(
        env_prefix="TASKLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("datetime_formats")
    @classmethod
    def _require_formats(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("datetime_formats must not be empty")
        return value


# Singleton instance - import this in your code
settings = Settings()
