"""
Join window rules.

A challenge accepts joins until the start of the calendar day that follows
its start date, so users can still join on the first day of the challenge.
"""

import math
from datetime import datetime
from typing import Optional

from ..models.challenge import Challenge
from ..models.credentials import Credentials
from ..utils.time import add_days, ensure_aware, local_midnight

DEFAULT_GRACE_DAYS = 1
SECONDS_PER_DAY = 24 * 60 * 60


def join_deadline(challenge: Challenge, grace_days: int = DEFAULT_GRACE_DAYS,
                  now: Optional[datetime] = None) -> datetime:
    """First instant at which joining is no longer offered."""
    tz_source = ensure_aware(now)
    return local_midnight(add_days(challenge.start_date, grace_days), tz_source)


def is_join_open(challenge: Challenge, credentials: Credentials,
                 now: Optional[datetime] = None,
                 grace_days: int = DEFAULT_GRACE_DAYS) -> bool:
    """Whether the join action may be offered to this session right now."""
    if not credentials.is_authenticated:
        return False
    current = ensure_aware(now)
    return current < join_deadline(challenge, grace_days, current)


def days_until_start(challenge: Challenge, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days left before the challenge starts, or None once it has started."""
    current = ensure_aware(now)
    start = local_midnight(challenge.start_date, current)
    remaining = (start - current).total_seconds()
    if remaining <= 0:
        return None
    return math.ceil(remaining / SECONDS_PER_DAY)
