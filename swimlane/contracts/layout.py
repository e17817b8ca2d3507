"""
Layout Contracts

Records produced by the lane allocator and the dataset builder.

Input: Event values -> Output: LaneAssignment -> RenderPayload
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .base import Event, GroupId


def lane_key(group: GroupId, lane_id: str) -> str:
    """Composite key the renderer uses to stack bars onto one sub-row."""
    return f"{group}_{lane_id}"


# =============================================================================
# ALLOCATION RECORDS
# =============================================================================

@dataclass
class Lane:
    """
    Transient allocator state for one lane of one group.

    Created on demand and never destroyed during a pass. Only the
    allocation call that created it may touch it.
    """
    group: GroupId
    index: int
    last_end: datetime


@dataclass(frozen=True)
class LaneAssignment:
    """An event resolved to a (group, lane) pair."""
    event: Event
    group: GroupId
    lane_id: str            # Unique per (group, lane_index), e.g. "Stack0"
    lane_index: int
    input_index: int        # Position of the event in the caller's sequence

    @property
    def stack(self) -> str:
        """Composite lane key shared by every bar on this sub-row."""
        return lane_key(self.group, self.lane_id)


# =============================================================================
# RENDER RECORDS
# =============================================================================

@dataclass(frozen=True)
class PaletteEntry:
    """Deterministic color for one distinct event name within one build."""
    name: str
    hue: float
    color: str


@dataclass(frozen=True)
class BarValue:
    """One bar in one row slot."""
    start: datetime
    end: datetime
    text: str               # Formatted "start - end"


@dataclass(frozen=True)
class Series:
    """
    One logical series per event.

    ``values`` has exactly one slot per row label. The slot of the event's
    group row carries the bar; every other slot is None ("no bar here").
    """
    label: str
    values: Tuple[Optional[BarValue], ...]
    color: str
    stack: str
    group: GroupId
    lane_id: str
    lane_index: int
    event_name: str

    @property
    def bar(self) -> Optional[BarValue]:
        for value in self.values:
            if value is not None:
                return value
        return None


@dataclass(frozen=True)
class RenderPayload:
    """
    Renderer-agnostic dataset.

    DETERMINISTIC:
    Same groups + same events (same input order) = identical payload.
    """
    row_labels: Tuple[GroupId, ...]
    series: Tuple[Series, ...]
    palette: Tuple[PaletteEntry, ...] = ()

    def color_of(self, name: str) -> Optional[str]:
        for entry in self.palette:
            if entry.name == name:
                return entry.color
        return None
