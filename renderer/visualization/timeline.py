"""
Timeline Visualization Contracts

Responsibility:
Chart-level options for a horizontal, stacked, time-axis bar chart.
Input: RenderPayload + TimeWindow -> Output: ChartView (Visualization)

The core never sees these types; they belong to the renderer.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


# Unit -> display format on the time axis
DISPLAY_FORMATS: Dict[str, str] = {
    "minute": "dd HH:mm",
    "hour": "MM-dd HH:mm",
    "day": "yyyy-MM-dd",
    "week": "yyyy-MM-dd",
    "month": "yyyy-MMM",
    "year": "yyyy",
}


@dataclass(frozen=True)
class TimeAxisView:
    """The rendered time axis, bounded by the intake window."""
    min_ms: int
    max_ms: int
    position: str = "top"
    display_formats: Tuple[Tuple[str, str], ...] = tuple(DISPLAY_FORMATS.items())


@dataclass(frozen=True)
class ZoomView:
    """Wheel zoom and pan, both on the time axis only."""
    wheel_enabled: bool = True
    zoom_mode: str = "x"
    pan_enabled: bool = True
    pan_mode: str = "x"
    y_limits: Tuple[int, int] = (0, 100)


@dataclass(frozen=True)
class ChartView:
    """
    Fully calculated chart options.

    DETERMINISTIC:
    Same payload + same window = identical view.
    """
    title: str
    axis: TimeAxisView
    zoom: ZoomView = field(default_factory=ZoomView)
    show_legend: bool = False
    index_axis: str = "y"
