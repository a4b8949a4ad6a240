"""Environment configuration and validation.

This module defines strongly-typed settings for the bot process, loaded from environment variables
(optionally via a local `.env` file). Parsing behavior itself is never configurable: these settings
only affect how the bot runs and renders replies.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


class Settings(BaseSettings):
    """Bot settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str = Field(alias="TELEGRAM_BOT_TOKEN")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    bot_reply_indent: int = Field(default=2, ge=0, le=8, alias="BOT_REPLY_INDENT")

    @field_validator("telegram_bot_token")
    @classmethod
    def validate_token_not_blank(cls, value: str) -> str:
        """Reject an empty token early instead of failing on the first Telegram API call."""

        value = value.strip()
        if not value:
            raise ValueError("TELEGRAM_BOT_TOKEN must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is one of the standard `logging` level names."""

        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        # Raising here is fine: caller can decide how to handle startup errors.
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
