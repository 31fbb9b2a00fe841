"""
Local-time helpers for challenge date handling.

Challenge start dates are plain calendar dates, interpreted in the user's
local timezone the same way the detail page shows them.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional


def local_now() -> datetime:
    """Current wall-clock time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def ensure_aware(value: Optional[datetime]) -> datetime:
    """
    Return an aware datetime, treating naive values as local time.

    Args:
        value: Datetime to normalize; None means now

    Returns:
        Timezone-aware datetime
    """
    if value is None:
        return local_now()
    if value.tzinfo is None:
        return value.astimezone()
    return value


def local_midnight(day: date, tz_source: Optional[datetime] = None) -> datetime:
    """
    Start of a calendar day.

    Args:
        day: Calendar date
        tz_source: Aware datetime whose timezone is used; defaults to local

    Returns:
        Aware datetime at 00:00 of ``day``
    """
    if tz_source is not None and tz_source.tzinfo is not None:
        return datetime.combine(day, time.min, tzinfo=tz_source.tzinfo)
    return datetime.combine(day, time.min).astimezone()


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)
