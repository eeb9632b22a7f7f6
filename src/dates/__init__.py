"""
Date helpers: current year, arithmetic, range checks and holiday lookups.

Basic usage::

    from datetime import datetime, timezone
    from src.dates import DateUnit, add, is_holiday

    start = datetime(2025, 1, 10, tzinfo=timezone.utc)
    add(start, 2, DateUnit.MONTHS)        # Timestamp('2025-03-10 00:00:00+0000', tz='UTC')
    await is_holiday(start)               # False

All real date math is done by pandas; callers only see datetime values.
"""

from src.dates.date_utils import (
    Holidays,
    Instant,
    Year,
    add,
    get_current_year,
    is_date_before,
    is_same_day,
    is_within_range,
    to_instant,
)
from src.dates.errors import (
    DateUtilsError,
    InvalidAmountError,
    InvalidDateError,
    InvalidRangeError,
)
from src.dates.holidays import HOLIDAY_DATES, get_holiday_name, get_holidays, is_holiday
from src.dates.units import DateUnit

__all__ = [
    "DateUnit",
    "DateUtilsError",
    "HOLIDAY_DATES",
    "Holidays",
    "Instant",
    "InvalidAmountError",
    "InvalidDateError",
    "InvalidRangeError",
    "Year",
    "add",
    "get_current_year",
    "get_holiday_name",
    "get_holidays",
    "is_date_before",
    "is_holiday",
    "is_same_day",
    "is_within_range",
    "to_instant",
]
