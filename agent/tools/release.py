"""
Context release tool for freeing context budget held by old tool outputs.
"""
import logging

from config import get_config
from core import CoreError, InMemoryConversationStore, release_context as release_context_core
from core.events import EventBus

logger = logging.getLogger(__name__)


class SessionDeps:
    """Dependencies passed to agent tools containing session context."""

    def __init__(self, session_id: str, event_bus: EventBus | None = None):
        self.session_id = session_id
        self.event_bus = event_bus


RELEASE_CONTEXT_DESCRIPTION = """Release the output of earlier tool calls to free up context.

Each released tool call keeps its place in the conversation, but its output is
replaced by a short placeholder with the title, line count, size and the
estimated tokens saved. Released output cannot be recovered; run the tool
again if you need the content later.

Use this when:
- You have read large files whose content you no longer need verbatim
- Long command or search output has already been acted upon
- The conversation is approaching the context limit

Usage:
- Pass toolCallIds to release specific calls (use the IDs from previous tool outputs)
- Omit toolCallIds to release the most recent completed calls; count sets how
  many (default 3) and tools limits them to certain tool names (e.g. ["read", "grep"])
- Only completed tool calls can be released, and each call only once
"""


async def release_context(
    session_id: str,
    tool_call_ids: list[str] | None = None,
    count: int | None = None,
    tools: list[str] | None = None,
    event_bus: EventBus | None = None,
) -> str:
    """
    Release tool call outputs in a session and describe what was freed.

    Args:
        session_id: The session identifier
        tool_call_ids: Specific tool call IDs to release
        count: Number of recent tool calls to release when no IDs are given
        tools: Tool names to consider when no IDs are given

    Returns:
        Release summary, or an error message if the request was rejected
    """
    release_config = get_config().release
    if count is None:
        count = release_config.default_count
    if tools is None and release_config.tools:
        tools = release_config.tools

    try:
        result = await release_context_core(
            session_id,
            InMemoryConversationStore(event_bus),
            tool_call_ids=tool_call_ids,
            count=count,
            tools=tools,
        )
    except CoreError as e:
        return f"Error: {e}"

    return result.output
