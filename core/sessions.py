"""
Sessions own conversation logs.

Only the lifecycle the release flow depends on lives here: a session is
created empty and looked up by ID. Messages are appended through
``core.messages``.
"""

import logging
import time

from .events import SESSION_CREATED, Event, EventBus
from .exceptions import NotFoundError
from .models import Session, SessionTime, gen_id
from .state import session_messages, sessions

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_ID = "default"
DEFAULT_VERSION = "1.0.0"
DEFAULT_SESSION_TITLE = "New Session"


async def create_session(
    directory: str,
    event_bus: EventBus,
    title: str | None = None,
    parent_id: str | None = None,
) -> Session:
    """Register a new session with an empty conversation log and announce it."""
    created = time.time()
    session = Session(
        id=gen_id("ses_"),
        projectID=DEFAULT_PROJECT_ID,
        directory=directory,
        title=title or DEFAULT_SESSION_TITLE,
        version=DEFAULT_VERSION,
        time=SessionTime(created=created, updated=created),
        parentID=parent_id,
    )
    sessions[session.id] = session
    session_messages[session.id] = []

    logger.info("Created session %s in %s", session.id, directory)
    await event_bus.publish(
        Event(type=SESSION_CREATED, properties={"info": session.model_dump()})
    )
    return session


def get_session(session_id: str) -> Session:
    """Look up a session; raises NotFoundError for unknown IDs."""
    try:
        return sessions[session_id]
    except KeyError:
        raise NotFoundError("Session", session_id) from None


def touch_session(session_id: str) -> None:
    """Record that the session's conversation log changed."""
    get_session(session_id).time.updated = time.time()
