"""
Synthetic Board Generator

Seeded generation of demo boards: company-like group names, product-like
event names, starts drawn uniformly inside the window and ends drawn
between the start and one month later.

Same seed + same window = identical sample.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple
import random

from ..contracts.base import Event, GroupId, TimeWindow
from ..intake.window import default_window, shift_months


COMPANY_STEMS = (
    "Acme", "Globex", "Initech", "Umbrella", "Hooli", "Vandelay", "Stark",
    "Wayne", "Tyrell", "Cyberdyne", "Soylent", "Wonka", "Gringotts", "Oscorp",
)
COMPANY_SUFFIXES = ("Group", "LLC", "Inc", "and Sons", "Partners", "Holdings")

PRODUCT_ADJECTIVES = (
    "Ergonomic", "Rustic", "Sleek", "Handcrafted", "Refined", "Practical",
    "Gorgeous", "Intelligent", "Small", "Licensed",
)
PRODUCT_MATERIALS = (
    "Steel", "Wooden", "Granite", "Cotton", "Rubber", "Bronze", "Plastic", "Frozen",
)
PRODUCT_NOUNS = (
    "Chair", "Table", "Keyboard", "Gloves", "Bike", "Towels", "Shoes", "Lamp",
    "Hat", "Sausages",
)


@dataclass(frozen=True)
class SampleConfig:
    """Shape of a generated board."""
    event_count: int = 20
    group_count: int = 5
    seed: Optional[int] = None


@dataclass(frozen=True)
class Sample:
    groups: Tuple[GroupId, ...]
    events: Tuple[Event, ...]


def _company_name(rng: random.Random) -> str:
    return f"{rng.choice(COMPANY_STEMS)} {rng.choice(COMPANY_SUFFIXES)}"


def _product_name(rng: random.Random) -> str:
    return " ".join((
        rng.choice(PRODUCT_ADJECTIVES),
        rng.choice(PRODUCT_MATERIALS),
        rng.choice(PRODUCT_NOUNS),
    ))


def _between(rng: random.Random, start: datetime, end: datetime) -> datetime:
    offset = (end - start) * rng.random()
    return start + offset


def _unique_groups(rng: random.Random, count: int) -> Tuple[GroupId, ...]:
    groups = []
    while len(groups) < count:
        name = _company_name(rng)
        if name in groups:
            name = f"{name} {len(groups) + 1}"
        groups.append(name)
    return tuple(groups)


def generate_sample(
    config: SampleConfig = SampleConfig(),
    window: Optional[TimeWindow] = None,
) -> Sample:
    """Generate a random board; events may extend past the window end."""
    window = window or default_window()
    rng = random.Random(config.seed)

    groups = _unique_groups(rng, config.group_count)
    events = []
    if groups:
        for _ in range(config.event_count):
            group = rng.choice(groups)
            start = _between(rng, window.start, window.end)
            end = _between(rng, start, shift_months(start, 1))
            events.append(Event(name=_product_name(rng), group=group, start=start, end=end))

    return Sample(groups=groups, events=tuple(events))
