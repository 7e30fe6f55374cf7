"""
Pydantic models for sessions, conversation messages and release results.
"""

from .message import (
    AssistantMessage,
    Message,
    MessageTime,
    MessageWithParts,
    ModelInfo,
    PathInfo,
    TokenInfo,
    UserMessage,
)
from .part import FilePart, Part, PartTime, ReasoningPart, TextPart, ToolPart
from .release_record import ReleaseMetadata, ReleaseRecord, ReleaseResult
from .session import Session, SessionTime
from .tool_state import (
    ToolState,
    ToolStateCompleted,
    ToolStateError,
    ToolStatePending,
    ToolStateRunning,
    ToolTime,
)
from .utils import gen_id

__all__ = [
    # Utils
    "gen_id",
    # Time models
    "SessionTime",
    "MessageTime",
    "PartTime",
    "ToolTime",
    # Session models
    "Session",
    # Provider info
    "ModelInfo",
    "TokenInfo",
    "PathInfo",
    # Message models
    "UserMessage",
    "AssistantMessage",
    "Message",
    "MessageWithParts",
    # Part models
    "TextPart",
    "ReasoningPart",
    "ToolStatePending",
    "ToolStateRunning",
    "ToolStateCompleted",
    "ToolStateError",
    "ToolState",
    "ToolPart",
    "FilePart",
    "Part",
    # Release models
    "ReleaseRecord",
    "ReleaseMetadata",
    "ReleaseResult",
]
