"""
Base Contracts and Shared Types

Foundational types used across all layers: groups, events, the date
window used by the intake layer, and the explicit error model.

BOUNDARY ENFORCEMENT:
=====================
- Events are immutable inputs; the core derives new records from them
- The core does NOT validate events. ``start <= end`` is assumed, and
  checking it is the intake layer's job
- Errors are data, not exceptions
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Generic, Optional, Tuple, TypeVar
from enum import Enum, auto


# =============================================================================
# IDENTITY TYPES
# =============================================================================

GroupId = str
"""Opaque group identifier. Order of groups is insertion order = row order."""


# =============================================================================
# EVENT TYPES
# =============================================================================

@dataclass(frozen=True)
class Event:
    """
    A time-bounded event owned by one group.

    Well-formed ranges (start <= end) are assumed but not enforced here;
    inverted ranges pass through the core untouched.
    """
    name: str
    group: GroupId
    start: datetime
    end: datetime


@dataclass(frozen=True)
class TimeWindow:
    """Inclusive date window events must fall into at the intake edge."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("TimeWindow start must be before or equal to end")

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def contains_range(self, start: datetime, end: datetime) -> bool:
        return start >= self.start and end <= self.end


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for edge validation.
    The core itself has no error taxonomy: allocation and building are total.
    """
    # Group intake
    INVALID_GROUP_NAME = auto()
    DUPLICATE_GROUP = auto()

    # Event intake
    INCOMPLETE_EVENT = auto()
    UNKNOWN_GROUP = auto()
    INVALID_TIME_RANGE = auto()
    OUTSIDE_WINDOW = auto()

    # Document loading
    MALFORMED_DOCUMENT = auto()


@dataclass(frozen=True)
class Error:
    """
    Immutable error representation with full context.
    Errors are data, not exceptions - they can be returned and rendered.
    """
    code: ErrorCode
    message: str
    timestamp: datetime
    context: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @staticmethod
    def create(code: ErrorCode, message: str, **context: str) -> Error:
        return Error(
            code=code,
            message=message,
            timestamp=datetime.now(timezone.utc),
            context=tuple(sorted((k, str(v)) for k, v in context.items()))
        )


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Result type for edge operations that can fail.
    Either contains a value OR an error, never both.
    """
    value: Optional[T] = None
    error: Optional[Error] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @staticmethod
    def success(value: T) -> Result[T]:
        return Result(value=value, error=None)

    @staticmethod
    def failure(error: Error) -> Result[T]:
        return Result(value=None, error=error)
