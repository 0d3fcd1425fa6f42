# File: notion_scheduler/core/config_manager.py
"""
Configuration management for the Notion week scheduler.
Loads settings from environment variables (and a .env file) into an
explicit Config value that is passed to every component.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import pytz
from dotenv import load_dotenv

from notion_scheduler.core.exceptions import ConfigurationError

BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from notion_scheduler/core/
ENV_FILE = BASE_DIR / ".env"

REQUIRED_SETTINGS = ("NOTION_API_KEY", "TEMPLATE_DB_ID", "CALENDAR_DB_ID")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"


@dataclass(frozen=True)
class Config:
    """Application configuration, built once per process."""
    notion_api_key: str
    template_db_id: str
    calendar_db_id: str
    timezone: str = "UTC"
    log_level: str = "INFO"
    api_url: str = NOTION_API_URL
    notion_version: str = NOTION_VERSION
    request_timeout: float = 30.0
    max_retries: int = 3
    retry_delay_ms: int = 1000

    def __post_init__(self):
        self.validate()

    @property
    def tz(self) -> pytz.BaseTzInfo:
        return pytz.timezone(self.timezone)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def validate(self) -> None:
        """Check that every setting is present and usable."""
        errors = []

        for attr, env_name in zip(
            ("notion_api_key", "template_db_id", "calendar_db_id"), REQUIRED_SETTINGS
        ):
            if not getattr(self, attr):
                errors.append(f"{env_name} not set")

        try:
            pytz.timezone(self.timezone)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown TIMEZONE: {self.timezone}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        if self.request_timeout <= 0:
            errors.append("NOTION_TIMEOUT must be positive")
        if self.max_retries < 1:
            errors.append("MAX_RETRIES must be at least 1")
        if self.retry_delay_ms < 0:
            errors.append("RETRY_DELAY_MS cannot be negative")

        if errors:
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(errors) + ". Please check your .env file"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ`` after
                loading the project's .env file.

        Raises:
            ConfigurationError: If a required setting is missing or invalid
        """
        if environ is None:
            load_dotenv(ENV_FILE)
            environ = os.environ

        missing = [key for key in REQUIRED_SETTINGS if not environ.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file"
            )

        return cls(
            notion_api_key=environ["NOTION_API_KEY"],
            template_db_id=environ["TEMPLATE_DB_ID"],
            calendar_db_id=environ["CALENDAR_DB_ID"],
            timezone=environ.get("TIMEZONE") or "UTC",
            log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
            request_timeout=_parse_number(environ, "NOTION_TIMEOUT", 30.0, float),
            max_retries=_parse_number(environ, "MAX_RETRIES", 3, int),
            retry_delay_ms=_parse_number(environ, "RETRY_DELAY_MS", 1000, int),
        )

    def summary(self) -> str:
        """Settings without sensitive data, for the start-up log."""
        return "\n".join([
            f"  - Template DB: {self.template_db_id[:8]}...",
            f"  - Calendar DB: {self.calendar_db_id[:8]}...",
            f"  - Timezone: {self.timezone}",
            f"  - Log Level: {self.log_level}",
        ])


def _parse_number(environ: Mapping[str, str], key: str, default, cast):
    raw = environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from None
