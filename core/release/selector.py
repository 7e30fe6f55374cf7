"""
Auto-selection of release candidates.

Used when the caller does not name the tool calls to release: the most
recent completed, not-yet-released tool calls are chosen instead.
"""

import logging
from dataclasses import dataclass, field

from ..constants import RELEASED_PREFIX
from ..models import MessageWithParts, ToolPart, ToolStateCompleted

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """Outcome of scanning a conversation for release candidates."""

    call_ids: list[str] = field(default_factory=list)
    skipped_running: int = 0
    skipped_released: int = 0


def is_released(part: ToolPart) -> bool:
    """Return True if the part's output already carries the released sentinel."""
    return isinstance(part.state, ToolStateCompleted) and part.state.output.startswith(
        RELEASED_PREFIX
    )


def iter_tool_parts(messages: list[MessageWithParts]):
    """Yield ``(message_index, tool_part)`` for every tool part in conversation order."""
    for msg_idx, msg in enumerate(messages):
        for part in msg.parts:
            if isinstance(part, ToolPart):
                yield msg_idx, part


def select_recent(
    messages: list[MessageWithParts],
    count: int,
    tools: list[str] | None = None,
) -> Selection:
    """
    Pick the ``count`` most recent eligible tool calls.

    A tool call is eligible when it has completed, its output has not been
    released, and (if ``tools`` is non-empty) its tool name is listed.
    Non-completed and already released parts are counted so the caller can
    report them.

    Args:
        messages: Conversation snapshot, oldest first
        count: Maximum number of calls to select; non-positive selects nothing
        tools: Optional allow-list of tool names

    Returns:
        Selection with the chosen call IDs and skip counters
    """
    selection = Selection()
    candidates: list[tuple[int, str]] = []

    for msg_idx, part in iter_tool_parts(messages):
        if part.state.status != "completed":
            selection.skipped_running += 1
            continue
        if is_released(part):
            selection.skipped_released += 1
            continue
        if tools and part.tool not in tools:
            continue
        candidates.append((msg_idx, part.callID))

    # Stable sort keeps part order within a message
    candidates.sort(key=lambda c: c[0])
    if count > 0:
        selection.call_ids = [call_id for _, call_id in candidates[-count:]]

    logger.debug(
        "Selected %d of %d candidates (skipped %d running, %d released)",
        len(selection.call_ids),
        len(candidates),
        selection.skipped_running,
        selection.skipped_released,
    )
    return selection
