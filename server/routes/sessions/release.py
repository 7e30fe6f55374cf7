"""
Release context endpoint.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from config import get_config
from core import (
    InMemoryConversationStore,
    NotFoundError,
    ReleaseError,
    ReleaseResult,
    release_context,
)
from core.events import CONTEXT_RELEASED, Event

from ...event_bus import get_event_bus
from ...logging_config import log_timing
from ...requests import ReleaseRequest


logger = logging.getLogger(__name__)


router = APIRouter()


@router.post("/session/{sessionID}/release")
async def release_context_route(
    sessionID: str,
    request: ReleaseRequest | None = None,
    directory: str | None = Query(None),
) -> ReleaseResult:
    """
    Release the output of tool calls in a session.

    Released outputs are replaced by a short placeholder; the rest of the
    conversation is left untouched.
    """
    release_config = get_config().release
    request = request or ReleaseRequest()

    count = request.count if request.count is not None else release_config.default_count
    tools = request.tools if request.tools is not None else (release_config.tools or None)

    event_bus = get_event_bus()
    try:
        with log_timing(logger, f"Release context for session {sessionID}"):
            result = await release_context(
                sessionID,
                InMemoryConversationStore(event_bus),
                tool_call_ids=request.toolCallIds,
                count=count,
                tools=tools,
            )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ReleaseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if result.metadata.releasedCount:
        await event_bus.publish(
            Event(
                type=CONTEXT_RELEASED,
                properties={
                    "session_id": sessionID,
                    "released_count": result.metadata.releasedCount,
                    "tokens_saved": result.metadata.savedTokens,
                },
            )
        )

    return result
