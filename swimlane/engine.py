"""
Engine Orchestration Module

Caller-side board that owns the source lists of groups and events and
runs the full pipeline on demand.

DESIGN PRINCIPLES:
==================
1. The board is the only holder of mutable source lists
2. Every mutation goes through intake validation
3. compute() runs allocation + building on a snapshot; nothing is cached
4. The core never sees the board, only tuples
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple
import logging
import os

from .contracts.base import Event, GroupId, Result, TimeWindow
from .contracts.layout import LaneAssignment, RenderPayload
from .core.allocation import allocate
from .core.dataset import DEFAULT_TIME_FORMAT, build
from .core.palette import PaletteConfig
from .intake.validation import validate_event, validate_group
from .intake.window import default_window
from .sampling import SampleConfig, generate_sample

logger = logging.getLogger(__name__)


@dataclass
class TimelineConfig:
    """Unified configuration for the timeline engine."""
    window_months: int = 1
    time_format: str = DEFAULT_TIME_FORMAT
    palette: PaletteConfig = None
    sample: SampleConfig = None
    seed_sample_data: bool = False

    def __post_init__(self):
        self.palette = self.palette or PaletteConfig()
        self.sample = self.sample or SampleConfig()

    @classmethod
    def from_env(cls) -> TimelineConfig:
        """Defaults overridden by SWIMLANE_* environment variables."""
        seed = os.environ.get("SWIMLANE_SAMPLE_SEED")
        return cls(
            window_months=int(os.environ.get("SWIMLANE_WINDOW_MONTHS", "1")),
            time_format=os.environ.get("SWIMLANE_TIME_FORMAT", DEFAULT_TIME_FORMAT),
            sample=SampleConfig(seed=int(seed) if seed else None),
            seed_sample_data=os.environ.get("SWIMLANE_SEED_SAMPLE", "").lower() in ("1", "true", "yes"),
        )


class TimelineBoard:
    """
    Groups and events for one timeline.

    LAYER FLOW:
    ===========
    1. Intake: add_group / add_event validate and append
    2. Core: compute() allocates lanes and builds the payload
    """

    def __init__(
        self,
        config: Optional[TimelineConfig] = None,
        now: Optional[datetime] = None,
    ):
        self._config = config or TimelineConfig()
        self._window = default_window(now, self._config.window_months)
        self._groups: List[GroupId] = []
        self._events: List[Event] = []

    @property
    def config(self) -> TimelineConfig:
        return self._config

    @property
    def window(self) -> TimeWindow:
        return self._window

    @property
    def groups(self) -> Tuple[GroupId, ...]:
        return tuple(self._groups)

    @property
    def events(self) -> Tuple[Event, ...]:
        return tuple(self._events)

    # =========================================================================
    # INTAKE INTERFACE
    # =========================================================================

    def add_group(self, name: Optional[str]) -> Result[GroupId]:
        result = validate_group(name, self._groups)
        if result.is_success:
            self._groups.append(result.value)
            logger.info("Group added: %s", result.value)
        return result

    def add_event(
        self,
        name: Optional[str],
        group: Optional[GroupId],
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> Result[Event]:
        result = validate_event(name, group, start, end, self._groups, self._window)
        if result.is_success:
            self._events.append(result.value)
            logger.info("Event added: %s on %s", name, group)
        return result

    def load(self, groups: Tuple[GroupId, ...], events: Tuple[Event, ...]):
        """Replace the board contents without validation (trusted documents)."""
        self._groups = list(groups)
        self._events = list(events)

    def seed_sample(self, sample_config: Optional[SampleConfig] = None):
        """Replace the board contents with a generated sample."""
        sample = generate_sample(sample_config or self._config.sample, self._window)
        self.load(sample.groups, sample.events)
        logger.info(
            "Seeded %d groups and %d events", len(sample.groups), len(sample.events)
        )

    # =========================================================================
    # PIPELINE INTERFACE
    # =========================================================================

    def assignments(self) -> Tuple[LaneAssignment, ...]:
        return allocate(self.groups, self.events)

    def compute(self) -> RenderPayload:
        groups = self.groups
        return build(
            groups,
            allocate(groups, self.events),
            self._config.time_format,
            self._config.palette,
        )
