"""
Intake Layer

RESPONSIBILITY: Validate user-entered groups and events at the edge
ALLOWED INPUTS: Raw form values (possibly missing)
OUTPUTS: Result[GroupId], Result[Event]

WHAT THIS LAYER MUST NOT DO:
============================
- Allocate lanes or build datasets
- Silently fix inputs (swap inverted ranges, trim names, clamp dates)
"""

from .validation import validate_group, validate_event
from .window import shift_months, as_wall_clock, default_window

__all__ = ['validate_group', 'validate_event', 'shift_months', 'as_wall_clock', 'default_window']
