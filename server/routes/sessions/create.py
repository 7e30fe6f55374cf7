"""
POST /session: start an empty conversation log.
"""

from fastapi import APIRouter, Query

from config import get_working_directory
from core import Session, create_session

from ...event_bus import get_event_bus
from ...requests import CreateSessionRequest

router = APIRouter()


@router.post("/session")
async def create_session_route(
    request: CreateSessionRequest, directory: str | None = Query(None)
) -> Session:
    """Create a session rooted at ``directory`` (default: the server's working dir)."""
    return await create_session(
        directory or get_working_directory(),
        get_event_bus(),
        title=request.title,
        parent_id=request.parentID,
    )
