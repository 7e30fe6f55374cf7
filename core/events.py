"""
Events published by conversation and release operations.

Core code only sees the EventBus protocol; the server plugs in an
SSE-backed bus and tests use NullEventBus or a recording double.
"""

from typing import Any, Protocol

from pydantic import BaseModel

SESSION_CREATED = "session.created"
MESSAGE_UPDATED = "message.updated"
PART_UPDATED = "part.updated"
CONTEXT_RELEASED = "session.context_released"


class Event(BaseModel):
    """A named event with a JSON-serializable payload."""

    type: str
    properties: dict[str, Any]


class EventBus(Protocol):
    async def publish(self, event: Event) -> None:
        ...


class NullEventBus:
    """EventBus that drops everything."""

    async def publish(self, event: Event) -> None:
        return None
