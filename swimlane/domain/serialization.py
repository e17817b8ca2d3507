"""
Board and Payload Serialization

JSON in and out of the engine. Board documents look like:

    {"groups": ["A", "B"],
     "events": [{"name": "...", "group": "A",
                 "start": "2026-01-01T10:00:00", "end": "..."}]}
"""

import json
from dataclasses import asdict
from datetime import datetime, date
from enum import Enum
from typing import Any, Dict, Tuple

from ..contracts.base import Event, GroupId
from ..contracts.layout import RenderPayload
from ..intake.window import as_wall_clock


class TimelineEncoder(json.JSONEncoder):
    """
    JSON Encoder for engine contracts.

    RULES:
    1. Dates are ISO 8601 strings.
    2. Enums use their .value.
    3. Dataclasses become dicts.
    4. Sets -> Lists (sorted for determinism).
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return sorted(list(obj))
        if hasattr(obj, "__dataclass_fields__"):
            return asdict(obj)

        return super().default(obj)


def dumps(obj: Any, **kwargs) -> str:
    return json.dumps(obj, cls=TimelineEncoder, **kwargs)


def payload_to_dict(payload: RenderPayload) -> Dict[str, Any]:
    """Plain-JSON view of a payload (datetimes as ISO strings)."""
    return json.loads(dumps(payload))


def board_to_dict(groups: Tuple[GroupId, ...], events: Tuple[Event, ...]) -> Dict[str, Any]:
    return {
        "groups": list(groups),
        "events": [
            {
                "name": e.name,
                "group": e.group,
                "start": e.start.isoformat(),
                "end": e.end.isoformat(),
            }
            for e in events
        ],
    }


def board_from_dict(data: Dict[str, Any]) -> Tuple[Tuple[GroupId, ...], Tuple[Event, ...]]:
    """
    Parse a board document.

    Offset-bearing timestamps are folded into naive local wall-clock time,
    the same as at the API edge.

    Raises ValueError on non-object documents, missing keys or unparsable
    timestamps.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Malformed board document: expected an object, got {type(data).__name__}")
    try:
        groups = tuple(data.get("groups", ()))
        events = tuple(
            Event(
                name=item["name"],
                group=item["group"],
                start=as_wall_clock(datetime.fromisoformat(item["start"])),
                end=as_wall_clock(datetime.fromisoformat(item["end"])),
            )
            for item in data.get("events", ())
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed board document: {e}") from e
    return groups, events
