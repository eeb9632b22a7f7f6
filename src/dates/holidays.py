"""
Simulated holiday lookup.

The holiday list is fixed: New Year's Day, Christmas and New Year's Eve of the
requested year, each at midnight in the reference time zone. The lookup is a
coroutine that waits a configured delay before answering, standing in for a
remote holiday API. It performs no I/O and always resolves for any year a
Timestamp can represent.
"""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional, Tuple

import pandas as pd

from src.config.settings import get_settings
from src.dates.date_utils import Holidays, Year, is_same_day, reference_timezone, to_instant

logger = logging.getLogger(__name__)

# (month, day, name), in the order get_holidays() returns them.
HOLIDAY_DATES: List[Tuple[int, int, str]] = [
    (1, 1, "New Year's Day"),
    (12, 25, "Christmas"),
    (12, 31, "New Year's Eve"),
]


def _resolve_delay(delay: Optional[float]) -> float:
    if delay is None:
        return get_settings().dates.holiday_delay_seconds
    return delay


def _midnight(year: Year, month: int, day: int) -> pd.Timestamp:
    return pd.Timestamp(datetime(year, month, day)).tz_localize(
        reference_timezone(), ambiguous=False, nonexistent="shift_forward"
    )


async def _fetch_holiday_table(year: Year, delay: Optional[float]) -> List[Tuple[pd.Timestamp, str]]:
    seconds = _resolve_delay(delay)
    logger.debug("Fetching holidays for %s (simulated delay %.3fs)", year, seconds)
    await asyncio.sleep(seconds)
    return [(_midnight(year, month, day), name) for month, day, name in HOLIDAY_DATES]


async def get_holidays(year: Year, delay: Optional[float] = None) -> Holidays:
    """
    Return the holidays of `year` after a simulated lookup delay.

    Args:
        year: Calendar year.
        delay: Seconds to wait before resolving. Defaults to
               DATES_HOLIDAY_DELAY_SECONDS (0.1).

    Returns:
        [Jan 1, Dec 25, Dec 31] of `year`, as Timestamps at midnight in the
        reference time zone.
    """
    table = await _fetch_holiday_table(year, delay)
    return [holiday for holiday, _ in table]


async def is_holiday(date: datetime, delay: Optional[float] = None) -> bool:
    """
    Check whether `date` falls on a holiday of its own calendar year.

    The year is taken in the reference time zone, so 2024-12-31T23:30-05:00
    is looked up as 2025 when the reference zone is UTC.

    Raises:
        InvalidDateError: If `date` is not a valid datetime.
    """
    ts = to_instant(date)
    holidays = await get_holidays(ts.year, delay=delay)
    return any(is_same_day(ts, holiday) for holiday in holidays)


async def get_holiday_name(date: datetime, delay: Optional[float] = None) -> Optional[str]:
    """
    Return the name of the holiday on `date`'s calendar day, or None.

    Raises:
        InvalidDateError: If `date` is not a valid datetime.
    """
    ts = to_instant(date)
    for holiday, name in await _fetch_holiday_table(ts.year, delay):
        if is_same_day(ts, holiday):
            return name
    return None
