"""
Core Layer

RESPONSIBILITY: Lane allocation and dataset building
ALLOWED INPUTS: Group sequence, Event values
OUTPUTS: LaneAssignment, RenderPayload

Both operations are pure and total. Each call owns its own lane table.
"""

from .allocation import allocate, lane_id_for, lane_key, lane_counts
from .dataset import build, compute_payload, format_range, DEFAULT_TIME_FORMAT
from .palette import PaletteConfig, build_palette

__all__ = [
    'allocate', 'lane_id_for', 'lane_key', 'lane_counts',
    'build', 'compute_payload', 'format_range', 'DEFAULT_TIME_FORMAT',
    'PaletteConfig', 'build_palette',
]
