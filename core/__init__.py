"""
Conversation storage and context release, independent of any transport.

The server package exposes these operations over HTTP; the agent package
exposes release_context as a model tool. Models live in core.models.
"""

from .events import Event, EventBus, NullEventBus
from .exceptions import (
    CoreError,
    DuplicateTargetError,
    InvalidOperationError,
    NotFoundError,
    ReleaseError,
    TargetAlreadyReleasedError,
    TargetNotFoundError,
    TargetNotTerminalError,
)
from .messages import append_message, get_message, list_messages, update_part
from .models import MessageWithParts, Part, ReleaseResult, Session, ToolPart
from .release import release_context
from .sessions import create_session, get_session
from .store import ConversationStore, InMemoryConversationStore
from .tokens import estimate_tokens

__all__ = [
    "CoreError",
    "NotFoundError",
    "InvalidOperationError",
    "ReleaseError",
    "DuplicateTargetError",
    "TargetNotFoundError",
    "TargetNotTerminalError",
    "TargetAlreadyReleasedError",
    "Event",
    "EventBus",
    "NullEventBus",
    "Session",
    "MessageWithParts",
    "Part",
    "ToolPart",
    "ReleaseResult",
    "create_session",
    "get_session",
    "list_messages",
    "get_message",
    "append_message",
    "update_part",
    "ConversationStore",
    "InMemoryConversationStore",
    "release_context",
    "estimate_tokens",
]
