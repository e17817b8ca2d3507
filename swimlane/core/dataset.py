"""
Dataset Builder

Responsibility:
Deterministic transformation of lane assignments into a renderer-ready
RenderPayload. Input: groups + LaneAssignment -> Output: RenderPayload

RULES:
======
1. One Series per assignment, in assignment order
2. Exactly one value slot per row label; only the event's own group row
   carries a bar
3. An event whose group is not a row label gets no bar (all slots None)
4. No I/O, no validation, no state between calls
"""

from __future__ import annotations
from datetime import datetime
from typing import Dict, Iterable, Optional, Sequence
import logging

from ..contracts.base import Event, GroupId
from ..contracts.layout import BarValue, LaneAssignment, RenderPayload, Series
from .allocation import allocate
from .palette import PaletteConfig, build_palette, color_map

logger = logging.getLogger(__name__)

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M"


def format_range(start: datetime, end: datetime, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    return f"{start.strftime(time_format)} - {end.strftime(time_format)}"


def _row_index(groups: Sequence[GroupId]) -> Dict[GroupId, int]:
    rows: Dict[GroupId, int] = {}
    for i, group in enumerate(groups):
        rows.setdefault(group, i)
    return rows


def build(
    groups: Sequence[GroupId],
    assignments: Iterable[LaneAssignment],
    time_format: str = DEFAULT_TIME_FORMAT,
    palette_config: Optional[PaletteConfig] = None,
) -> RenderPayload:
    """Build the render payload for already-allocated events."""
    row_labels = tuple(groups)
    rows = _row_index(row_labels)
    assignments = tuple(assignments)

    palette = build_palette(
        (a.event.name for a in assignments),
        palette_config or PaletteConfig(),
    )
    colors = color_map(palette)

    series = []
    for assignment in assignments:
        event = assignment.event
        range_text = format_range(event.start, event.end, time_format)

        values = [None] * len(row_labels)
        row = rows.get(assignment.group)
        if row is not None:
            values[row] = BarValue(start=event.start, end=event.end, text=range_text)

        series.append(Series(
            label=f"{event.name} ({range_text})",
            values=tuple(values),
            color=colors[event.name],
            stack=assignment.stack,
            group=assignment.group,
            lane_id=assignment.lane_id,
            lane_index=assignment.lane_index,
            event_name=event.name,
        ))

    logger.debug(
        "Built %d series over %d rows with %d colors",
        len(series), len(row_labels), len(palette),
    )
    return RenderPayload(row_labels=row_labels, series=tuple(series), palette=palette)


def compute_payload(
    groups: Sequence[GroupId],
    events: Iterable[Event],
    time_format: str = DEFAULT_TIME_FORMAT,
    palette_config: Optional[PaletteConfig] = None,
) -> RenderPayload:
    """Full pipeline: allocate, then build."""
    groups = tuple(groups)
    return build(groups, allocate(groups, events), time_format, palette_config)
