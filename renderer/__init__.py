"""
Renderer Adapter

Responsibility:
Turn the engine's RenderPayload into chart-library options.

PRINCIPLES:
1. Consumes the payload as-is; never re-allocates lanes
2. Library-specific option objects live here, never in the core
"""

from .mapper import to_chart_config, lane_rows, chart_view, to_epoch_ms
from .visualization.timeline import ChartView, TimeAxisView, ZoomView, DISPLAY_FORMATS

__all__ = [
    'to_chart_config', 'lane_rows', 'chart_view', 'to_epoch_ms',
    'ChartView', 'TimeAxisView', 'ZoomView', 'DISPLAY_FORMATS',
]
