"""
Configuration settings for the date helpers.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). Settings are validated when
they are loaded, so a typo in a time zone name fails at startup instead of
halfway through a date comparison.

**What is configurable?**
  - The reference time zone: naive datetimes are read in it, calendar days are
    compared in it, and holidays are built at midnight in it.
  - The simulated latency of the holiday lookup.
  - The log level of the package logger.

**Testing pattern**: tests never touch real configuration. They set
environment variables with monkeypatch and call reset_settings() so the next
get_settings() call reloads them.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pandas as pd
from dotenv import load_dotenv

# Load .env from project root (dev/local environments); a missing file is fine.
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class DateSettings:
    """
    Configuration for date arithmetic and holiday lookups.

    **Why a reference time zone?**
      "Same calendar day" only means something relative to a zone: 23:30 UTC
      on Jan 1 is already Jan 2 in Tokyo. One configured zone keeps every
      comparison, every naive input and every generated holiday consistent.

    Attributes:
        timezone: IANA zone name (e.g., "UTC", "Europe/Amsterdam").
                  Defaults to "UTC".
        holiday_delay_seconds: Simulated latency of the holiday lookup in
                               seconds (default 0.1). Must be non-negative.
    """
    timezone: str = "UTC"
    holiday_delay_seconds: float = 0.1

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.timezone:
            raise ValueError(
                "DATES_TIMEZONE must not be empty. "
                "Use an IANA zone name such as 'UTC' or 'Europe/Amsterdam'."
            )
        try:
            pd.Timestamp(0, tz=self.timezone)
        except (KeyError, ValueError) as e:
            raise ValueError(
                f"DATES_TIMEZONE is not a known time zone: {self.timezone!r} ({e})"
            )
        if self.holiday_delay_seconds < 0:
            raise ValueError(
                f"holiday_delay_seconds must be non-negative, got: {self.holiday_delay_seconds}"
            )

    @classmethod
    def from_env(cls) -> "DateSettings":
        """
        Load date settings from environment variables.

        **Environment variables**:
          - DATES_TIMEZONE (optional): Reference zone. Defaults to "UTC".
          - DATES_HOLIDAY_DELAY_SECONDS (optional): Simulated holiday lookup
            latency. Defaults to 0.1.

        Returns:
            DateSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set to something that cannot be parsed
                        or fails validation.
        """
        timezone = os.getenv("DATES_TIMEZONE", "UTC")
        delay_str = os.getenv("DATES_HOLIDAY_DELAY_SECONDS", "0.1")

        try:
            holiday_delay_seconds = float(delay_str)
        except ValueError:
            raise ValueError(
                f"DATES_HOLIDAY_DELAY_SECONDS must be a number, got: {delay_str}"
            )

        return cls(
            timezone=timezone,
            holiday_delay_seconds=holiday_delay_seconds,
        )


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for the package logger.

    Attributes:
        level: Standard logging level name (DEBUG, INFO, WARNING, ERROR,
               CRITICAL). Defaults to WARNING so the library stays quiet.
    """
    level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(
                f"DATES_LOG_LEVEL must be a standard logging level name, got: {self.level}"
            )

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """Load logging settings from DATES_LOG_LEVEL (default WARNING)."""
        return cls(level=os.getenv("DATES_LOG_LEVEL", "WARNING"))


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the date helpers.

    **Usage pattern**:
      ```python
      from src.config.settings import get_settings

      settings = get_settings()
      tz = settings.dates.timezone
      ```

    Attributes:
        dates: Date arithmetic and holiday settings.
        logging: Package logger settings.
    """
    dates: DateSettings = field(default_factory=DateSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Unlike credentials, nothing here is required: every value has a
        default, so an empty environment yields a valid Settings object.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any subsystem setting is set but invalid.
        """
        return cls(
            dates=DateSettings.from_env(),
            logging=LoggingSettings.from_env(),
        )


# Global settings instance (lazy-loaded)
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings instance (lazy-loaded singleton).

    The first call reads the environment; later calls return the cached
    object. Call reset_settings() to force a reload.

    Returns:
        Global Settings object.

    Raises:
        ValueError: If the environment holds an invalid value.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("DATES_TIMEZONE", "Asia/Tokyo")
          reset_settings()
          assert get_settings().dates.timezone == "Asia/Tokyo"
      ```
    """
    global _default_settings
    _default_settings = None
