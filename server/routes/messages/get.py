"""
GET /session/{sessionID}/message/{messageID}
"""

from fastapi import APIRouter, HTTPException

from core import MessageWithParts, NotFoundError, get_message

router = APIRouter()


@router.get("/session/{sessionID}/message/{messageID}")
async def get_message_route(sessionID: str, messageID: str) -> MessageWithParts:
    try:
        return get_message(sessionID, messageID)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
