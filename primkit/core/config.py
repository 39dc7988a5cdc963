"""
Configuration settings for primkit.

Values are read from ``PRIMKIT_*`` environment variables or a local ``.env``.
"""
import logging
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


def normalize_log_level(value: str) -> str:
    """Upper-case a level name and reject names logging does not know."""
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PRIMKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_DIR: Optional[str] = None  # console only when unset
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5

    # Dates
    TIMEZONE: Optional[str] = None  # IANA name, e.g. "America/New_York"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return normalize_log_level(v)


settings = Settings()
