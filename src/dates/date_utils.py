"""
Date arithmetic and comparison helpers.

**Conceptual**: Thin, validated wrappers around pandas Timestamps. Callers pass
plain `datetime` objects (or pd.Timestamp, which subclasses datetime); every
helper normalises them into the reference time zone before doing anything, so
naive and aware inputs compare consistently and "calendar day" always means
a day in that one zone.

**Functionally**:
  - get_current_year: year of "now", read from an injectable Clock.
  - add: add an amount of a unit, returning a new Timestamp.
  - is_within_range: strict (exclusive) between-check with range validation.
  - is_date_before: strict ordering.
  - is_same_day: calendar-day equality, time of day ignored.

Inputs are never mutated; Timestamps are immutable and every result is new.
"""

import numbers
from datetime import datetime
from typing import List, Optional

import numpy as np
import pandas as pd
from pandas.errors import OutOfBoundsDatetime, OutOfBoundsTimedelta

from src.config.settings import get_settings
from src.dates.errors import InvalidAmountError, InvalidDateError, InvalidRangeError
from src.dates.units import DateUnit, UnitLike, to_offset
from src.utils.time import Clock, get_real_clock

# A point in time with at least day precision.
Instant = pd.Timestamp
Year = int
Holidays = List[pd.Timestamp]


def reference_timezone() -> str:
    """Return the configured reference time zone name (DATES_TIMEZONE)."""
    return get_settings().dates.timezone


def to_instant(value: object) -> pd.Timestamp:
    """
    Validate `value` and express it as a Timestamp in the reference zone.

    Naive datetimes are read as wall-clock time in the reference zone. Aware
    datetimes keep their instant and are converted to the reference zone.

    Args:
        value: Candidate Instant.

    Returns:
        Timezone-aware pd.Timestamp in the reference zone.

    Raises:
        InvalidDateError: If `value` is not a datetime, or is NaT.
    """
    # pd.NaT passes the isinstance check, so test for it explicitly.
    if not isinstance(value, datetime) or value is pd.NaT:
        raise InvalidDateError()

    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return _localize_wall_clock(ts)
    return ts.tz_convert(reference_timezone())


def _localize_wall_clock(ts: pd.Timestamp) -> pd.Timestamp:
    # Wall-clock times in a DST gap move forward; repeated times take standard time.
    return ts.tz_localize(reference_timezone(), ambiguous=False, nonexistent="shift_forward")


def _validate_amount(amount: object) -> float:
    # bool is a numbers.Real subclass but never a meaningful amount.
    if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
        raise InvalidAmountError()
    value = float(amount)
    if not np.isfinite(value):
        raise InvalidAmountError()
    return value


def get_current_year(clock: Optional[Clock] = None) -> Year:
    """
    Return the calendar year of "now" in the reference time zone.

    Args:
        clock: Time source. Defaults to the real system clock; tests pass a
               FrozenClock to pin "now".

    Returns:
        The current year as an int.
    """
    if clock is None:
        clock = get_real_clock()
    return to_instant(clock.now()).year


def add(date: datetime, amount: float, unit: UnitLike = DateUnit.DAYS) -> pd.Timestamp:
    """
    Add `amount` of `unit` to `date` and return the result as a new Timestamp.

    Seconds and minutes are absolute durations and keep fractions. Days and
    weeks move the wall-clock date; months and years move the calendar month
    and clamp to the last valid day (Jan 31 + 1 month -> Feb 28, or Feb 29 in
    a leap year). Calendar amounts are rounded half away from zero to whole
    days or whole months; see src.dates.units for the details.

    Args:
        date: Starting point.
        amount: Finite number of units to add (negative to subtract).
        unit: DateUnit or its string value. Defaults to DateUnit.DAYS;
              unrecognized units also fall back to days.

    Returns:
        New pd.Timestamp in the reference time zone.

    Raises:
        InvalidDateError: If `date` is not a valid datetime.
        InvalidAmountError: If `amount` is not a finite real number, or the
                            result falls outside the range a Timestamp can hold.

    Example:
        >>> add(datetime(2025, 1, 10, tzinfo=timezone.utc), 2, DateUnit.MONTHS)
        Timestamp('2025-03-10 00:00:00+0000', tz='UTC')
    """
    start = to_instant(date)
    value = _validate_amount(amount)
    unit = DateUnit.resolve(unit)

    try:
        offset = to_offset(value, unit)
        result = start + offset
        if isinstance(offset, pd.DateOffset):
            # Calendar steps keep the wall clock, which may not exist in the zone.
            result = _localize_wall_clock(result.tz_localize(None))
    except (OverflowError, OutOfBoundsDatetime, OutOfBoundsTimedelta, ValueError):
        # ValueError: calendar steps past year 9999 ("year 10000 is out of range")
        raise InvalidAmountError()
    return result


def is_within_range(date: datetime, from_date: datetime, to_date: datetime) -> bool:
    """
    Check whether `date` lies strictly between `from_date` and `to_date`.

    Both bounds are exclusive: a date equal to either bound is not within the
    range. `from_date == to_date` is a valid (empty) range.

    Raises:
        InvalidDateError: If any argument is not a valid datetime.
        InvalidRangeError: If `from_date` is after `to_date`.
    """
    ts = to_instant(date)
    lower = to_instant(from_date)
    upper = to_instant(to_date)

    if lower > upper:
        raise InvalidRangeError()

    return lower < ts < upper


def is_date_before(date: datetime, compare_date: datetime) -> bool:
    """True iff `date` is strictly earlier than `compare_date`."""
    return to_instant(date) < to_instant(compare_date)


def is_same_day(date: datetime, compare_date: datetime) -> bool:
    """True iff both values fall on the same calendar day in the reference zone."""
    return to_instant(date).date() == to_instant(compare_date).date()
