"""
Intake Validation

Edge validation for user-entered groups and events. This is the ONLY
place input is checked; the core accepts whatever reaches it.

MAPPING RULES:
==============
1. Every rejection is an explicit Error with an ErrorCode
2. No repair: inputs are accepted as given or rejected
3. Group names are taken verbatim; blank names are invalid
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional, Sequence

from ..contracts.base import Error, ErrorCode, Event, GroupId, Result, TimeWindow


def validate_group(name: Optional[str], existing: Sequence[GroupId]) -> Result[GroupId]:
    """Accept a new group name if it is non-blank and not already present."""
    if not name or not name.strip():
        return Result.failure(Error.create(
            ErrorCode.INVALID_GROUP_NAME,
            "Group name is invalid",
        ))

    if name in existing:
        return Result.failure(Error.create(
            ErrorCode.DUPLICATE_GROUP,
            "Group already exists",
            group=name,
        ))

    return Result.success(name)


def validate_event(
    name: Optional[str],
    group: Optional[GroupId],
    start: Optional[datetime],
    end: Optional[datetime],
    groups: Sequence[GroupId],
    window: Optional[TimeWindow] = None,
) -> Result[Event]:
    """
    Accept a fully specified event inside the window.

    Checks, in order: completeness, known group, ordered range, window.
    """
    if not name or not group or start is None or end is None:
        missing = [
            label for label, value in (
                ("name", name), ("group", group), ("start", start), ("end", end)
            )
            if value is None or value == ""
        ]
        return Result.failure(Error.create(
            ErrorCode.INCOMPLETE_EVENT,
            "Please fill in all event details",
            missing=",".join(missing),
        ))

    if group not in groups:
        return Result.failure(Error.create(
            ErrorCode.UNKNOWN_GROUP,
            "Event references an unknown group",
            group=group,
        ))

    if start > end:
        return Result.failure(Error.create(
            ErrorCode.INVALID_TIME_RANGE,
            "Event start must be before or equal to its end",
            start=start.isoformat(),
            end=end.isoformat(),
        ))

    if window is not None and not window.contains_range(start, end):
        return Result.failure(Error.create(
            ErrorCode.OUTSIDE_WINDOW,
            "Event must be within the date range",
            window_start=window.start.isoformat(),
            window_end=window.end.isoformat(),
        ))

    return Result.success(Event(name=name, group=group, start=start, end=end))
