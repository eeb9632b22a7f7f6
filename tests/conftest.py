"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import src...' works, and gives
every test a clean, default configuration.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.config.settings import reset_settings  # noqa: E402

DATES_ENV_VARS = (
    "DATES_TIMEZONE",
    "DATES_HOLIDAY_DELAY_SECONDS",
    "DATES_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop any DATES_* variables from the environment and reload settings around each test."""
    for name in DATES_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def use_timezone(monkeypatch):
    """Switch the reference time zone for the duration of a test."""
    def _use(name: str) -> None:
        monkeypatch.setenv("DATES_TIMEZONE", name)
        reset_settings()
    return _use
