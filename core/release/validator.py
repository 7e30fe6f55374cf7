"""
Validation of release targets.

Every check runs over the whole target list before anything is mutated, so
a rejected request leaves the conversation untouched.
"""

from ..exceptions import (
    DuplicateTargetError,
    TargetAlreadyReleasedError,
    TargetNotFoundError,
    TargetNotTerminalError,
)
from ..models import MessageWithParts, ToolPart
from .selector import is_released, iter_tool_parts


def validate_targets(
    messages: list[MessageWithParts],
    call_ids: list[str],
) -> dict[str, ToolPart]:
    """
    Resolve and validate the tool calls to release.

    Args:
        messages: Conversation snapshot, oldest first
        call_ids: Requested tool call IDs

    Returns:
        Mapping of call ID to its tool part, in conversation order

    Raises:
        DuplicateTargetError: If a call ID is repeated
        TargetNotFoundError: If any call ID does not exist (lists all of them)
        TargetNotTerminalError: If a target has not completed
        TargetAlreadyReleasedError: If a target was released before
    """
    if len(set(call_ids)) != len(call_ids):
        raise DuplicateTargetError(call_ids)

    wanted = set(call_ids)
    parts: dict[str, ToolPart] = {}
    for _, part in iter_tool_parts(messages):
        if part.callID in wanted:
            # A repeated callID in the log resolves to its latest part
            parts[part.callID] = part

    missing = [call_id for call_id in call_ids if call_id not in parts]
    if missing:
        raise TargetNotFoundError(missing)

    for call_id, part in parts.items():
        if part.state.status != "completed":
            raise TargetNotTerminalError(call_id, part.state.status)
        if is_released(part):
            raise TargetAlreadyReleasedError(call_id)

    return parts
