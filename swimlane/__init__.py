"""
Swimlane Timeline Engine

This package turns time-bounded events, each owned by a named group, into a
lane-labeled dataset for a Gantt-style timeline. Layers communicate only
through the frozen contracts in ``swimlane.contracts``.

LAYER STRUCTURE:
================

1. CORE (core/)
   - Responsibility: Lane allocation and dataset building
   - Allowed inputs: Group list and Event values
   - Outputs: LaneAssignment, RenderPayload (immutable)
   - MUST NOT: Validate input, perform I/O, hold state between calls

2. INTAKE (intake/)
   - Responsibility: Edge validation of user-entered groups and events
   - Outputs: Result carrying an Event or an explicit Error
   - MUST NOT: Allocate lanes or build datasets

3. SAMPLING (sampling/)
   - Responsibility: Seeded synthetic boards for demos and tests

4. ENGINE (engine.py)
   - Responsibility: Caller-side board holding the source lists
   - Runs the full pipeline on a snapshot for every compute

5. API / CLI (api/, cli.py)
   - Responsibility: HTTP and command-line surfaces over the engine

Data flows one way: events -> allocation -> dataset -> renderer.
"""

from .contracts.base import Event, GroupId, TimeWindow, ErrorCode, Error, Result
from .contracts.layout import (
    Lane, LaneAssignment, BarValue, Series, PaletteEntry, RenderPayload
)
from .core.allocation import allocate, lane_id_for, lane_key, lane_counts
from .core.dataset import build, compute_payload
from .core.palette import build_palette
from .engine import TimelineBoard, TimelineConfig

__all__ = [
    # Contracts
    'Event', 'GroupId', 'TimeWindow', 'ErrorCode', 'Error', 'Result',
    'Lane', 'LaneAssignment', 'BarValue', 'Series', 'PaletteEntry', 'RenderPayload',
    # Core
    'allocate', 'lane_id_for', 'lane_key', 'lane_counts',
    'build', 'compute_payload', 'build_palette',
    # Engine
    'TimelineBoard', 'TimelineConfig',
]

__version__ = "0.1.0"
