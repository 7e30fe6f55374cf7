"""
Conversation store interface.

The release pipeline reads and writes conversations only through the
``ConversationStore`` protocol. ``InMemoryConversationStore`` adapts the
in-memory message operations to it.
"""

from typing import Protocol

from .events import EventBus, NullEventBus
from .messages import list_messages, update_part
from .models import MessageWithParts, Part


class ConversationStore(Protocol):
    """Read/update access to a session's conversation log."""

    async def list_messages(self, session_id: str) -> list[MessageWithParts]:
        """Return a snapshot of every message in the session, oldest first."""
        ...

    async def update_part(self, part: Part) -> None:
        """Replace a stored part, matched by its IDs, with ``part``."""
        ...


class InMemoryConversationStore:
    """ConversationStore backed by core.state."""

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus or NullEventBus()

    async def list_messages(self, session_id: str) -> list[MessageWithParts]:
        return [MessageWithParts.model_validate(msg) for msg in list_messages(session_id)]

    async def update_part(self, part: Part) -> None:
        await update_part(part.model_dump(), self.event_bus)
