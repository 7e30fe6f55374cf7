"""
Conversation log primitives.

Messages are kept as plain dicts (``{"info": ..., "parts": [...]}``) in
``core.state``, oldest first. Appends validate through MessageWithParts;
part updates replace a stored part wholesale.
"""

import logging
from typing import Any

from .events import MESSAGE_UPDATED, PART_UPDATED, Event, EventBus
from .exceptions import NotFoundError
from .models import MessageWithParts
from .sessions import get_session, touch_session
from .state import session_messages

logger = logging.getLogger(__name__)


def _log(session_id: str) -> list[dict[str, Any]]:
    get_session(session_id)
    return session_messages.setdefault(session_id, [])


def list_messages(session_id: str, limit: int | None = None) -> list[dict[str, Any]]:
    """
    Return the session's messages in conversation order.

    Args:
        session_id: The session ID
        limit: Only return this many of the most recent messages

    Raises:
        NotFoundError: If the session is not found
    """
    messages = _log(session_id)
    return messages[-limit:] if limit else messages


def get_message(session_id: str, message_id: str) -> dict[str, Any]:
    """Return one message; raises NotFoundError for an unknown session or message."""
    found = next((m for m in _log(session_id) if m["info"]["id"] == message_id), None)
    if found is None:
        raise NotFoundError("Message", message_id)
    return found


async def append_message(
    session_id: str,
    message: dict[str, Any],
    event_bus: EventBus,
) -> dict[str, Any]:
    """
    Validate a message with its parts and add it to the end of the log.

    Publishes ``message.updated`` for the message and ``part.updated`` for
    each of its parts.

    Raises:
        NotFoundError: If the session is not found
        pydantic.ValidationError: If the message is malformed
    """
    log = _log(session_id)
    stored = MessageWithParts.model_validate(message).model_dump()
    log.append(stored)
    touch_session(session_id)

    logger.debug(
        "Session %s: appended %s with %d part(s)",
        session_id,
        stored["info"]["id"],
        len(stored["parts"]),
    )

    await event_bus.publish(Event(type=MESSAGE_UPDATED, properties={"info": stored["info"]}))
    for part in stored["parts"]:
        await event_bus.publish(Event(type=PART_UPDATED, properties=part))
    return stored


async def update_part(part: dict[str, Any], event_bus: EventBus) -> dict[str, Any]:
    """
    Swap in ``part`` for the stored part with the same ``id``.

    The part is located through its ``sessionID`` and ``messageID``.

    Raises:
        NotFoundError: If the session, message or part is not found
    """
    parts = get_message(part["sessionID"], part["messageID"])["parts"]
    index = next((i for i, p in enumerate(parts) if p["id"] == part["id"]), None)
    if index is None:
        raise NotFoundError("Part", part["id"])

    parts[index] = part
    touch_session(part["sessionID"])

    await event_bus.publish(Event(type=PART_UPDATED, properties=part))
    return part
