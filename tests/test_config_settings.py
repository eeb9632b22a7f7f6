"""
Tests for src/config/settings.py

Settings are loaded from environment variables, validated up front and cached.
"""

from dataclasses import FrozenInstanceError

import pytest

from src.config.settings import (
    DateSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reset_settings,
)


def test_defaults_with_empty_environment():
    settings = get_settings()

    assert settings.dates.timezone == "UTC"
    assert settings.dates.holiday_delay_seconds == pytest.approx(0.1)
    assert settings.logging.level == "WARNING"


def test_values_loaded_from_environment(monkeypatch):
    monkeypatch.setenv("DATES_TIMEZONE", "Europe/Amsterdam")
    monkeypatch.setenv("DATES_HOLIDAY_DELAY_SECONDS", "0.25")
    monkeypatch.setenv("DATES_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.dates.timezone == "Europe/Amsterdam"
    assert settings.dates.holiday_delay_seconds == pytest.approx(0.25)
    assert settings.logging.level == "debug"


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("DATES_TIMEZONE", "Asia/Tokyo")

    assert get_settings() is first
    assert get_settings().dates.timezone == "UTC"

    reset_settings()

    assert get_settings().dates.timezone == "Asia/Tokyo"


def test_unknown_timezone_rejected():
    with pytest.raises(ValueError, match="not a known time zone"):
        DateSettings(timezone="Mars/Olympus_Mons")


def test_empty_timezone_rejected():
    with pytest.raises(ValueError, match="must not be empty"):
        DateSettings(timezone="")


def test_negative_delay_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        DateSettings(holiday_delay_seconds=-1.0)


def test_non_numeric_delay_rejected(monkeypatch):
    monkeypatch.setenv("DATES_HOLIDAY_DELAY_SECONDS", "soon")

    with pytest.raises(ValueError, match="must be a number"):
        DateSettings.from_env()


def test_invalid_log_level_rejected():
    with pytest.raises(ValueError, match="standard logging level"):
        LoggingSettings(level="LOUD")


def test_settings_are_frozen():
    settings = DateSettings()

    with pytest.raises(FrozenInstanceError):
        settings.timezone = "Asia/Tokyo"
