"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}

# Upper bound for look-ahead windows such as the reminder window.
MAX_LOOKAHEAD_DAYS = 366


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./ludoteca.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name used for stored and reported timestamps",
    )
    default_loan_days: int = Field(
        default=14,
        description="Loan length applied when a borrowing is created without a due date",
        gt=0,
    )
    max_loan_days: int = Field(
        default=90,
        description="Maximum distance between the borrow date and any due date",
        gt=0,
    )
    reminder_window_days: int = Field(
        default=2,
        description="Days before the due date during which reminder alerts are raised",
        ge=0,
        le=MAX_LOOKAHEAD_DAYS,
    )
    enable_overdue_alerts: bool = Field(
        default=True,
        description="Whether the alert sweep generates overdue alerts",
    )
    enable_reminder_alerts: bool = Field(
        default=True,
        description="Whether the alert sweep generates reminder alerts",
    )
    alerts_scheduler_enabled: bool = Field(
        default=False,
        description="Run the periodic alert sweep inside the API process",
    )
    alerts_check_interval_seconds: float = Field(
        default=24 * 60 * 60,
        description="Seconds between two runs of the periodic alert sweep",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["MAX_LOOKAHEAD_DAYS", "Settings", "get_settings", "reset_settings_cache"]
