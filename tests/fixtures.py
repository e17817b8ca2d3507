"""
Timeline Test Fixtures

Explicit boards with fixed timestamps. No random generation here;
property tests build their own inputs with hypothesis.
"""

from datetime import datetime, timedelta

from swimlane.contracts.base import Event


# =============================================================================
# FIXED TIMESTAMPS (deterministic)
# =============================================================================

T0 = datetime(2026, 1, 1, 0, 0, 0)
NOW = datetime(2026, 1, 15, 12, 0, 0)


def at(hours: float) -> datetime:
    return T0 + timedelta(hours=hours)


def event(name: str, group: str, start_h: float, end_h: float) -> Event:
    return Event(name=name, group=group, start=at(start_h), end=at(end_h))


# =============================================================================
# SCENARIOS
# =============================================================================

# A and B overlap (5-10); C starts exactly when A ends
OVERLAP_CHAIN = (
    event("A", "G", 0, 10),
    event("B", "G", 5, 15),
    event("C", "G", 10, 20),
)

# Mutually disjoint, given latest first
REVERSE_CHRONOLOGICAL = (
    event("third", "G", 20, 25),
    event("second", "G", 10, 15),
    event("first", "G", 0, 5),
)

BOARD_DOCUMENT = {
    "groups": ["G"],
    "events": [
        {"name": e.name, "group": e.group,
         "start": e.start.isoformat(), "end": e.end.isoformat()}
        for e in OVERLAP_CHAIN
    ],
}

# Same board with UTC offsets on every timestamp
OFFSET_BOARD_DOCUMENT = {
    "groups": ["G"],
    "events": [
        {"name": e.name, "group": e.group,
         "start": e.start.isoformat() + "+00:00", "end": e.end.isoformat() + "+00:00"}
        for e in OVERLAP_CHAIN
    ],
}
