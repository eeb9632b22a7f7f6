"""
date helpers – Main entry point.

Minimal bootstrap script: prints the current year and whether today is a holiday.
"""

import asyncio

from src.dates import get_current_year, get_holiday_name
from src.utils.logging import configure_logging
from src.utils.time import get_real_clock


def main() -> None:
    """Print the current year and today's holiday, if any."""
    configure_logging()
    today = get_real_clock().now()
    name = asyncio.run(get_holiday_name(today))
    print(f"Current year: {get_current_year()}")
    print(f"Today is {name}" if name else "Today is not a holiday")


if __name__ == "__main__":
    main()
