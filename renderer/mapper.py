"""
Payload to Chart Mapper

Converts the engine's RenderPayload into a Chart.js-shaped bar chart
configuration.

MAPPING RULES:
==============
1. One dataset per series, same order
2. None slots stay null ("no bar on this row")
3. Bars are [start_ms, end_ms, range_text]
4. Series sharing a stack key share one visual sub-row
5. Lanes within a group are ordered by ascending lane index
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from swimlane.contracts.base import GroupId, TimeWindow
from swimlane.contracts.layout import BarValue, RenderPayload

from .visualization.timeline import ChartView, TimeAxisView, ZoomView


def to_epoch_ms(moment: datetime) -> int:
    """Milliseconds since the epoch; naive datetimes are read as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(round(moment.timestamp() * 1000))


def chart_view(window: TimeWindow, title: str = "Timeline") -> ChartView:
    return ChartView(
        title=title,
        axis=TimeAxisView(min_ms=to_epoch_ms(window.start), max_ms=to_epoch_ms(window.end)),
        zoom=ZoomView(),
    )


def _bar(value: Optional[BarValue]) -> Optional[List[Any]]:
    if value is None:
        return None
    return [to_epoch_ms(value.start), to_epoch_ms(value.end), value.text]


def lane_rows(payload: RenderPayload) -> Dict[GroupId, Tuple[str, ...]]:
    """Stack keys per group, ordered by lane creation (ascending index)."""
    lanes: Dict[GroupId, Dict[int, str]] = {}
    for series in payload.series:
        lanes.setdefault(series.group, {})[series.lane_index] = series.stack
    return {
        group: tuple(keys[index] for index in sorted(keys))
        for group, keys in lanes.items()
    }


def _options(view: ChartView) -> Dict[str, Any]:
    return {
        "indexAxis": view.index_axis,
        "plugins": {
            "zoom": {
                "zoom": {
                    "wheel": {"enabled": view.zoom.wheel_enabled},
                    "mode": view.zoom.zoom_mode,
                },
                "limits": {
                    "y": {"min": view.zoom.y_limits[0], "max": view.zoom.y_limits[1]},
                },
                "pan": {
                    "enabled": view.zoom.pan_enabled,
                    "mode": view.zoom.pan_mode,
                },
            },
            "tooltip": {"position": "average"},
            "legend": {"display": view.show_legend},
            "title": {"display": True, "text": view.title},
        },
        "responsive": True,
        "scales": {
            "x": {
                "position": view.axis.position,
                "type": "time",
                "min": view.axis.min_ms,
                "max": view.axis.max_ms,
                "time": {"displayFormats": dict(view.axis.display_formats)},
                "stacked": True,
            },
            "y": {"stacked": True},
        },
    }


def to_chart_config(
    payload: RenderPayload,
    window: TimeWindow,
    title: str = "Timeline",
) -> Dict[str, Any]:
    """
    Build the chart configuration.

    Tooltip titles are the series labels, listed under ``tooltipTitles`` in
    dataset order since callbacks cannot travel as JSON.
    """
    view = chart_view(window, title)
    datasets = [
        {
            "label": series.label,
            "data": [_bar(value) for value in series.values],
            "backgroundColor": series.color,
            "stack": series.stack,
        }
        for series in payload.series
    ]
    return {
        "type": "bar",
        "data": {
            "labels": list(payload.row_labels),
            "datasets": datasets,
        },
        "options": _options(view),
        "tooltipTitles": [series.label for series in payload.series],
    }
