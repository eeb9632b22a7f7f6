"""
Units of date arithmetic and their mapping onto pandas offsets.

**Conceptual**: A unit says how to read a numeric amount. "3 days" and
"3 months" are different things: one is a fixed number of calendar days, the
other depends on which month you start in. This module turns (amount, unit)
into the pandas object that knows how to apply it to a Timestamp:

  - seconds, minutes -> timedelta (absolute elapsed time, fractions kept down
                        to the microsecond)
  - days, weeks      -> pd.DateOffset(days=...) (wall-clock calendar days)
  - months, years    -> pd.DateOffset(months=...) (calendar months, clamped
                        to the last valid day of the target month)

**Rounding convention**: calendar steps cannot be fractional. Days and weeks
are converted to whole days (weeks * 7) and months and years to whole months
(years * 12), then rounded half away from zero. Rounding is symmetric, so
adding +n and then -n always cancels out.

**Fallback policy**: an unrecognized unit is read as days, with a warning in
the log. This is deliberate; it is not an error.
"""

import logging
from datetime import timedelta
from enum import Enum
from typing import Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class DateUnit(str, Enum):
    """Granularity used to interpret an amount in `add()`."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def resolve(cls, value: object) -> "DateUnit":
        """
        Map a DateUnit or its string value onto a DateUnit.

        Strings are matched case-insensitively after stripping whitespace.
        Anything else that does not name a unit resolves to DAYS.

        Args:
            value: A DateUnit, a unit name such as "months", or anything else.

        Returns:
            The matching DateUnit, or DateUnit.DAYS when nothing matches.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning("Unrecognized date unit %r; falling back to days", value)
        return cls.DAYS


UnitLike = Union[DateUnit, str]

# Units whose amount is converted to whole calendar days / months, with the
# multiplier that gets them there.
_DAY_MULTIPLIERS = {DateUnit.DAYS: 1, DateUnit.WEEKS: 7}
_MONTH_MULTIPLIERS = {DateUnit.MONTHS: 1, DateUnit.YEARS: 12}


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, sending .5 away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(np.sign(value) * np.floor(np.abs(value) + 0.5))


def to_offset(amount: float, unit: DateUnit) -> Union[timedelta, pd.DateOffset]:
    """
    Build the pandas offset that adds `amount` of `unit` to a Timestamp.

    Args:
        amount: Finite number of units (already validated by the caller).
        unit: A resolved DateUnit.

    Returns:
        timedelta for seconds/minutes, pd.DateOffset for calendar units.
        timedelta spans about 2.7 million years, well past any Timestamp.

    Raises:
        OverflowError: If the amount does not fit in a timedelta.
    """
    if unit is DateUnit.SECONDS:
        return timedelta(seconds=amount)
    if unit is DateUnit.MINUTES:
        return timedelta(minutes=amount)
    if unit in _MONTH_MULTIPLIERS:
        months = round_half_away_from_zero(amount * _MONTH_MULTIPLIERS[unit])
        return pd.DateOffset(months=months)
    days = round_half_away_from_zero(amount * _DAY_MULTIPLIERS[unit])
    return pd.DateOffset(days=days)
