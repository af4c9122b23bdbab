"""Date utilities for vozfin.

Pure functions for resolving spoken date references against a reference day.
"""

import calendar
from datetime import date, timedelta


def shift_days(today: date, offset: int) -> date:
    """Resolve a relative day reference.

    Args:
        today: Reference date (the capture date).
        offset: Days to add (negative for the past).

    Returns:
        The shifted date.
    """
    return today + timedelta(days=offset)


def day_in_current_month(today: date, day: int) -> date:
    """Build a date for a spoken day-of-month in the reference month.

    Days outside the month are clamped to its first or last day, so
    "dia 31" in April resolves to April 30th instead of rolling over.

    Args:
        today: Reference date supplying month and year.
        day: Spoken day number.

    Returns:
        Date within the reference month.
    """
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=min(max(day, 1), last_day))
