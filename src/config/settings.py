"""Environment configuration and validation.

Settings are read from environment variables, optionally via a local `.env` file. Response
timestamps are written as UTC, so the DB session timezone is locked to UTC.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str = Field(alias="TELEGRAM_BOT_TOKEN")
    database_url: str = Field(alias="DATABASE_URL")
    db_timezone: str = Field(default="UTC", alias="DB_TIMEZONE")

    bot_username: str | None = Field(default=None, alias="BOT_USERNAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # The invitation page endpoint is off unless a port is given.
    http_host: str = Field(default="127.0.0.1", alias="HTTP_HOST")
    http_port: int | None = Field(default=None, alias="HTTP_PORT")

    @field_validator("db_timezone")
    @classmethod
    def validate_db_timezone_is_utc(cls, value: str) -> str:
        """Reject any DB timezone other than UTC."""

        if value.upper() != "UTC":
            raise ValueError("DB_TIMEZONE must be UTC")
        return "UTC"

    @field_validator("bot_username")
    @classmethod
    def strip_at_sign(cls, value: str | None) -> str | None:
        """Accept the username with or without a leading `@`."""

        if value is None:
            return None
        return value.strip().lstrip("@") or None


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
