"""
EventBus that fans core events out to server-sent event streams.

Every open stream owns a queue. A queue registered with a session ID only
receives that session's events.
"""

import asyncio
from functools import lru_cache
from typing import Any

from core import Event

EventQueue = asyncio.Queue[dict[str, Any]]


def event_session_id(event: Event) -> str | None:
    """Session an event belongs to, or None for server-wide events.

    Parts carry ``sessionID``; messages and sessions nest their data under
    ``info``; context release events use ``session_id``.
    """
    props = event.properties
    for key in ("sessionID", "session_id"):
        if key in props:
            return props[key]
    info = props.get("info")
    if isinstance(info, dict):
        return info.get("sessionID") or info.get("id")
    return None


class SSEEventBus:
    def __init__(self) -> None:
        self.subscribers: dict[EventQueue, str | None] = {}

    async def publish(self, event: Event) -> None:
        payload = event.model_dump()
        session_id = event_session_id(event)
        for queue, only_session in list(self.subscribers.items()):
            if only_session in (None, session_id):
                queue.put_nowait(payload)

    def subscribe(self, session_id: str | None = None) -> EventQueue:
        """Open a queue for all events, or for one session's events."""
        queue: EventQueue = asyncio.Queue()
        self.subscribers[queue] = session_id
        return queue

    def unsubscribe(self, queue: EventQueue) -> None:
        self.subscribers.pop(queue, None)


@lru_cache(maxsize=1)
def get_event_bus() -> SSEEventBus:
    """The process-wide event bus."""
    return SSEEventBus()
