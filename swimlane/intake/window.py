"""
Date Window

The intake edge only accepts events inside a window centred on "now":
N calendar months before to N calendar months after.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from ..contracts.base import TimeWindow


def shift_months(moment: datetime, months: int) -> datetime:
    """
    Move a datetime by whole calendar months.
    The day is clamped to the target month's length (Jan 31 + 1 -> Feb 28/29).
    """
    return moment + relativedelta(months=months)


def as_wall_clock(moment: datetime) -> datetime:
    """Board times are naive local wall-clock times; offsets are folded in."""
    if moment.tzinfo is not None:
        return moment.astimezone().replace(tzinfo=None)
    return moment


def default_window(now: Optional[datetime] = None, months: int = 1) -> TimeWindow:
    now = now or datetime.now()
    return TimeWindow(start=shift_months(now, -months), end=shift_months(now, months))
