"""
Contracts Module

Value types shared by every layer of the timeline engine. All
inter-layer communication MUST use these contracts.

DESIGN PRINCIPLES:
==================
1. Contract types are immutable (frozen dataclasses), except the
   transient Lane record owned by a single allocation pass
2. Failures at the edge are data (Error / Result), never exceptions
3. The core never mutates caller-owned values
"""

from .base import GroupId, Event, TimeWindow, ErrorCode, Error, Result
from .layout import (
    Lane, LaneAssignment, BarValue, Series, PaletteEntry, RenderPayload
)

__all__ = [
    'GroupId', 'Event', 'TimeWindow', 'ErrorCode', 'Error', 'Result',
    'Lane', 'LaneAssignment', 'BarValue', 'Series', 'PaletteEntry', 'RenderPayload',
]
