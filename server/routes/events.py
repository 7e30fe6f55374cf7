"""
Event SSE endpoints.
"""

import json
from typing import AsyncGenerator

from fastapi import APIRouter, Query
from sse_starlette.sse import EventSourceResponse

from ..event_bus import get_event_bus


router = APIRouter()


def _stream(session_id: str | None) -> EventSourceResponse:
    event_bus = get_event_bus()

    async def event_generator() -> AsyncGenerator[dict, None]:
        queue = event_bus.subscribe(session_id)
        try:
            while True:
                event = await queue.get()
                yield {"event": event["type"], "data": json.dumps(event)}
        finally:
            event_bus.unsubscribe(queue)

    return EventSourceResponse(event_generator())


@router.get("/global/event")
async def global_event(directory: str | None = Query(None)) -> EventSourceResponse:
    """Subscribe to all events via SSE."""
    return _stream(None)


@router.get("/session/{sessionID}/event")
async def session_event(
    sessionID: str, directory: str | None = Query(None)
) -> EventSourceResponse:
    """Subscribe to the events of one session via SSE."""
    return _stream(sessionID)
