"""
General utilities used by the receipt generator.
"""

from __future__ import annotations

from datetime import UTC, datetime
from math import floor

from dateutil.relativedelta import relativedelta


def calculate_age(since: datetime, now: datetime | None = None) -> str:
    """
    Calculate time elapsed since `since`.

    Args:
        since: Start of the period, e.g. account creation.
        now:   End of the period. Defaults to the current UTC time.

    Returns:
        str: Elapsed years, months and days.

    """

    if now is None:
        now = datetime.now(tz=UTC)

    diff = relativedelta(now, since)
    return (
        f"{diff.years} year{'s' if diff.years != 1 else ''}, "
        f"{diff.months} month{'s' if diff.months != 1 else ''}, "
        f"{diff.days} day{'s' if diff.days != 1 else ''}"
    )


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero for positives.

    `round()` rounds halves to even, which would make 1.5 MB and 2.5 MB
    both print as 2.

    Args:
        value: Non-negative number to round.

    Return:
        int: Rounded value.

    """

    return floor(value + 0.5)


def weekday_index(dt: datetime) -> int:
    """
    Index of `dt`'s weekday in a Sunday-first week.

    Args:
        dt: Timestamp to classify.

    Return:
        int: 0 for Sunday through 6 for Saturday.

    """

    return (dt.weekday() + 1) % 7


def format_receipt_date(dt: datetime) -> str:
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year}".upper()


def format_receipt_time(dt: datetime) -> str:
    hour: int = dt.hour % 12 or 12
    return f"{hour}:{dt:%M:%S} {'AM' if dt.hour < 12 else 'PM'}"
