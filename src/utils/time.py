"""
Clock abstractions so "now" can be injected.

Code that needs the current time takes a Clock and calls clock.now() instead
of reading the system clock directly. Production code passes a RealClock;
tests pass a FrozenClock pinned to a known instant, which makes anything
derived from "now" (the current year, for example) deterministic without
patching datetime.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Anything that can answer "what time is it right now?".

    **Usage**: accept a Clock as a parameter and call clock.now() where the
    current time is needed:

        def get_current_year(clock: Clock) -> int:
            return clock.now().year

        get_current_year(RealClock())
        get_current_year(FrozenClock(datetime(2025, 5, 15, 12, tzinfo=timezone.utc)))
    """

    def now(self) -> datetime:
        """Return the current time according to this clock (timezone-aware, UTC preferred)."""
        ...


class RealClock:
    """Clock backed by the system clock, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "RealClock()"


class FrozenClock:
    """
    Clock pinned to a single instant.

    Every call to now() returns the same value. FrozenClock never changes;
    advance() returns a new clock instead, so a clock shared between two
    pieces of code cannot drift under either of them.

    **Usage**:
        clock = FrozenClock(datetime(2025, 5, 15, 12, tzinfo=timezone.utc))
        clock.now()                              # 2025-05-15T12:00:00+00:00
        clock.advance(timedelta(days=1)).now()   # 2025-05-16T12:00:00+00:00
    """

    def __init__(self, fixed_now: datetime):
        """
        Args:
            fixed_now: The datetime returned on every call to now().
                       Timezone-aware values are recommended; naive values are
                       read in the configured reference zone by consumers.
        """
        self._fixed_now = fixed_now

    def now(self) -> datetime:
        return self._fixed_now

    def advance(self, delta: timedelta) -> "FrozenClock":
        """Return a new FrozenClock shifted by `delta` (may be negative)."""
        return FrozenClock(self._fixed_now + delta)

    def __repr__(self) -> str:
        return f"FrozenClock({self._fixed_now.isoformat()})"


def get_real_clock() -> Clock:
    """Return a RealClock (default clock for production code)."""
    return RealClock()


def get_frozen_clock(fixed_now: datetime) -> Clock:
    """
    Return a FrozenClock pinned to `fixed_now`.

    Args:
        fixed_now: The datetime to freeze at (timezone-aware recommended).

    Returns:
        FrozenClock instance configured with fixed_now.
    """
    return FrozenClock(fixed_now)
