"""
Health check endpoint.
"""

from fastapi import APIRouter

from config import get_config

from ..state import get_agent


router = APIRouter()


@router.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {
        "status": "ok",
        "agent_configured": get_agent() is not None,
        "release_context": get_config().tools.release_context,
    }
