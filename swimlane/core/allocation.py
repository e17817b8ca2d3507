"""
Lane Allocator

Greedy first-fit interval partitioning, per group.

ALGORITHM:
==========
1. Stable sort of all events by start (ties keep input order)
2. Per group, an ordered list of lanes, empty at first
3. For each event: scan the group's lanes in creation order and take the
   FIRST lane whose last_end <= event.start; otherwise open a new lane
4. One LaneAssignment per event, in sorted order

First-fit in creation order is the contract. It is not minimum
interval colouring and must not be replaced by earliest-finish or
best-fit selection: lane ids and lane counts are observable output.

WHAT THIS MODULE MUST NOT DO:
=============================
- Reject or repair malformed ranges (start > end passes through)
- Mutate caller-owned sequences or events
- Keep any state between calls
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from ..contracts.base import Event, GroupId
from ..contracts.layout import Lane, LaneAssignment, lane_key

logger = logging.getLogger(__name__)

LANE_PREFIX = "Stack"


def lane_id_for(index: int) -> str:
    """Lane identifier for the index-th lane of a group."""
    return f"{LANE_PREFIX}{index}"


def _first_free_lane(lanes: List[Lane], event: Event) -> Optional[Lane]:
    for lane in lanes:
        if lane.last_end <= event.start:
            return lane
    return None


def allocate(
    groups: Sequence[GroupId],
    events: Iterable[Event],
) -> Tuple[LaneAssignment, ...]:
    """
    Assign every event to a lane of its group.

    Groups not listed in ``groups`` get an implicit lane set on first
    sight. Returns exactly one assignment per input event.
    """
    indexed = list(enumerate(events))
    # sorted() is stable, so equal starts keep input order
    ordered = sorted(indexed, key=lambda pair: pair[1].start)

    lane_table: Dict[GroupId, List[Lane]] = {group: [] for group in groups}
    assignments: List[LaneAssignment] = []

    for input_index, event in ordered:
        lanes = lane_table.setdefault(event.group, [])

        lane = _first_free_lane(lanes, event)
        if lane is None:
            lane = Lane(group=event.group, index=len(lanes), last_end=event.end)
            lanes.append(lane)
        else:
            lane.last_end = event.end

        assignments.append(LaneAssignment(
            event=event,
            group=event.group,
            lane_id=lane_id_for(lane.index),
            lane_index=lane.index,
            input_index=input_index,
        ))

    logger.debug(
        "Allocated %d events onto %d lanes across %d groups",
        len(assignments),
        sum(len(lanes) for lanes in lane_table.values()),
        len(lane_table),
    )
    return tuple(assignments)


def lane_counts(assignments: Iterable[LaneAssignment]) -> Dict[GroupId, int]:
    """Number of lanes used per group, in first-seen group order."""
    counts: Dict[GroupId, int] = {}
    for assignment in assignments:
        counts[assignment.group] = max(
            counts.get(assignment.group, 0), assignment.lane_index + 1
        )
    return counts
