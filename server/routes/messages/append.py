"""
POST /session/{sessionID}/message/append
"""

from fastapi import APIRouter, HTTPException

from core import MessageWithParts, NotFoundError, append_message

from ...event_bus import get_event_bus

router = APIRouter()


@router.post("/session/{sessionID}/message/append")
async def append_message_route(sessionID: str, message: MessageWithParts) -> MessageWithParts:
    """Add a message with its parts to the end of the session's log."""
    if message.info.sessionID != sessionID:
        raise HTTPException(status_code=400, detail="Message belongs to a different session")
    try:
        return await append_message(sessionID, message.model_dump(), get_event_bus())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
