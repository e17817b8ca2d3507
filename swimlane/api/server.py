"""
Swimlane Timeline: API Server
=============================

HTTP surface over a single in-memory TimelineBoard.

Endpoints:
- GET  /health              -> Liveness
- GET  /api/v1/groups       -> Group list (row order)
- POST /api/v1/groups       -> Add a group
- GET  /api/v1/events       -> Event list (input order)
- POST /api/v1/events       -> Add an event
- POST /api/v1/board        -> Replace the board from a JSON document
- POST /api/v1/sample       -> Replace the board with a generated sample
- GET  /api/v1/timeline     -> RenderPayload
- GET  /api/v1/chart        -> Chart configuration for the payload

Usage:
    uvicorn swimlane.api.server:app --reload
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, Optional
import logging
import threading

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, field_validator

from renderer.mapper import to_chart_config

from ..contracts.base import Error, ErrorCode, Result
from ..domain.serialization import board_from_dict, board_to_dict, payload_to_dict
from ..engine import TimelineBoard, TimelineConfig
from ..intake.window import as_wall_clock
from ..sampling import SampleConfig

logger = logging.getLogger(__name__)

# =============================================================================
# INFRASTRUCTURE SETUP
# =============================================================================

# Global Board Instance
board_instance: Optional[TimelineBoard] = None
board_lock = threading.Lock()

STATUS_BY_CODE = {
    ErrorCode.DUPLICATE_GROUP: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the board on startup."""
    global board_instance

    config = TimelineConfig.from_env()
    print(f"[*] Initializing timeline board (window: +/-{config.window_months} months)")

    board_instance = TimelineBoard(config)
    if config.seed_sample_data:
        board_instance.seed_sample()
        print(f"[*] Seeded {len(board_instance.events)} sample events.")

    yield

    print("[*] Shutting down timeline board.")
    board_instance = None


app = FastAPI(
    title="Swimlane Timeline API",
    version="0.1.0",
    description="Lane-allocated Gantt timeline over groups and events",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST MODELS
# =============================================================================

class GroupCreate(BaseModel):
    name: Optional[str] = None


class EventCreate(BaseModel):
    # All optional: completeness is the intake layer's call, not pydantic's
    name: Optional[str] = None
    group: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @field_validator("start", "end")
    @classmethod
    def naive_local(cls, value: Optional[datetime]) -> Optional[datetime]:
        return None if value is None else as_wall_clock(value)


def _board() -> TimelineBoard:
    if not board_instance:
        raise HTTPException(status_code=503, detail="Board not initialized")
    return board_instance


def _error_detail(error: Error) -> Dict[str, Any]:
    return {
        "code": error.code.name,
        "message": error.message,
        "context": dict(error.context),
    }


def _raise_on_failure(result: Result):
    if result.is_failure:
        logger.info("Rejected input: %s", result.error.code.name)
        raise HTTPException(
            status_code=STATUS_BY_CODE.get(result.error.code, 400),
            detail=_error_detail(result.error),
        )


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/health")
async def health_check():
    """System status."""
    _board()
    return {"status": "online"}


@app.get("/api/v1/groups")
async def get_groups():
    return {"groups": list(_board().groups)}


@app.post("/api/v1/groups", status_code=201)
async def add_group(body: GroupCreate):
    board = _board()
    with board_lock:
        result = board.add_group(body.name)
    _raise_on_failure(result)
    return {"group": result.value}


@app.get("/api/v1/events")
async def get_events():
    board = _board()
    return board_to_dict(board.groups, board.events)


@app.post("/api/v1/events", status_code=201)
async def add_event(body: EventCreate):
    board = _board()
    with board_lock:
        result = board.add_event(body.name, body.group, body.start, body.end)
    _raise_on_failure(result)
    event = result.value
    return {
        "event": {
            "name": event.name,
            "group": event.group,
            "start": event.start.isoformat(),
            "end": event.end.isoformat(),
        }
    }


@app.post("/api/v1/board")
async def replace_board(document: Dict[str, Any]):
    """Replace the board from a trusted document (no window checks)."""
    board = _board()
    try:
        groups, events = board_from_dict(document)
    except ValueError as e:
        error = Error.create(ErrorCode.MALFORMED_DOCUMENT, str(e))
        raise HTTPException(status_code=400, detail=_error_detail(error))
    with board_lock:
        board.load(groups, events)
    return {"groups": len(groups), "events": len(events)}


@app.post("/api/v1/sample")
async def seed_sample(seed: Optional[int] = None, events: int = 20, groups: int = 5):
    board = _board()
    with board_lock:
        board.seed_sample(SampleConfig(event_count=events, group_count=groups, seed=seed))
    return {"groups": len(board.groups), "events": len(board.events)}


@app.get("/api/v1/timeline")
async def get_timeline():
    """Current RenderPayload, recomputed on every call."""
    board = _board()
    with board_lock:
        payload = board.compute()
    return payload_to_dict(payload)


@app.get("/api/v1/chart")
async def get_chart(title: str = "Timeline"):
    board = _board()
    with board_lock:
        payload = board.compute()
    return to_chart_config(payload, board.window, title)
