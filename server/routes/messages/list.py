"""
GET /session/{sessionID}/message
"""

from fastapi import APIRouter, HTTPException, Query

from core import MessageWithParts, NotFoundError, list_messages

router = APIRouter()


@router.get("/session/{sessionID}/message")
async def list_messages_route(
    sessionID: str, limit: int | None = Query(None, ge=1)
) -> list[MessageWithParts]:
    """Messages of a session, oldest first; ``limit`` keeps the most recent ones."""
    try:
        return list_messages(sessionID, limit)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
