"""
Context release.

Replaces the output of finished tool calls with a compact placeholder so the
conversation keeps its structure while freeing context budget. The pipeline
selects (or accepts) target tool calls, validates all of them, then rewrites
each one through the conversation store and reports the estimated savings.
"""

import logging

from config.defaults import DEFAULT_RELEASE_COUNT

from ..exceptions import ReleaseError
from ..models import ReleaseMetadata, ReleaseRecord, ReleaseResult
from ..store import ConversationStore
from ..tokens import TokenEstimator, estimate_tokens
from .extractor import extract_metadata, get_extractor, register_extractor
from .placeholder import build_placeholder
from .report import RELEASED_TITLE, format_output, no_candidates_result
from .selector import Selection, is_released, select_recent
from .validator import validate_targets

logger = logging.getLogger(__name__)


async def release_context(
    session_id: str,
    store: ConversationStore,
    tool_call_ids: list[str] | None = None,
    count: int = DEFAULT_RELEASE_COUNT,
    tools: list[str] | None = None,
    estimator: TokenEstimator = estimate_tokens,
) -> ReleaseResult:
    """
    Release the output of tool calls in a session.

    When ``tool_call_ids`` is empty or omitted, the ``count`` most recent
    completed tool calls (optionally limited to ``tools``) are released.
    Every target is validated before any part is rewritten.

    Args:
        session_id: The session ID
        store: Conversation store to read from and write to
        tool_call_ids: Explicit tool call IDs to release
        count: Number of recent tool calls to auto-select
        tools: Tool names allowed during auto-selection
        estimator: Token estimation function

    Returns:
        ReleaseResult with a textual summary and per-call metadata

    Raises:
        NotFoundError: If the session is not found
        ReleaseError: If any requested target cannot be released
    """
    messages = await store.list_messages(session_id)

    selection = Selection()
    if not tool_call_ids:
        selection = select_recent(messages, count, tools)
        if not selection.call_ids:
            logger.info("No tool calls to release in session %s", session_id)
            return no_candidates_result(
                selection.skipped_running, selection.skipped_released
            )
        tool_call_ids = selection.call_ids

    try:
        parts = validate_targets(messages, tool_call_ids)
    except ReleaseError as e:
        logger.warning("Release rejected for session %s: %s", session_id, e)
        raise

    files: list[ReleaseRecord] = []
    total_saved_tokens = 0

    for call_id, part in parts.items():
        record = extract_metadata(part)
        record.savedTokens = estimator(part.state.output)
        total_saved_tokens += record.savedTokens
        files.append(record)

        # Only the output changes; time.compacted stays unset so the
        # placeholder is shown as-is rather than as cleared content
        state = part.state.model_copy(update={"output": build_placeholder(part.tool, record)})
        await store.update_part(part.model_copy(update={"state": state}))
        logger.debug("Released tool call %s (%s, ~%d tokens)", call_id, part.tool, record.savedTokens)

    logger.info(
        "Released %d tool call(s) in session %s (saved ~%d tokens)",
        len(parts),
        session_id,
        total_saved_tokens,
    )

    return ReleaseResult(
        title=RELEASED_TITLE,
        metadata=ReleaseMetadata(
            releasedCount=len(parts),
            savedTokens=total_saved_tokens,
            files=files,
        ),
        output=format_output(
            files,
            total_saved_tokens,
            selection.skipped_running,
            selection.skipped_released,
        ),
    )


__all__ = [
    "release_context",
    "select_recent",
    "validate_targets",
    "extract_metadata",
    "register_extractor",
    "get_extractor",
    "build_placeholder",
    "format_output",
    "is_released",
    "Selection",
]
