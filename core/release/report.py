"""Human-readable summaries of release_context runs."""

from ..models import ReleaseRecord, ReleaseResult

NO_CANDIDATES_TITLE = "No Tool Calls Found"
RELEASED_TITLE = "Released Context"


def no_candidates_result(skipped_running: int, skipped_released: int) -> ReleaseResult:
    message = "No completed tool calls found to release."
    if skipped_running > 0:
        message += f" Skipped {skipped_running} running tool(s) - they must finish first."
    if skipped_released > 0:
        message += f" Skipped {skipped_released} already released tool(s)."
    return ReleaseResult(title=NO_CANDIDATES_TITLE, output=message)


def format_output(
    files: list[ReleaseRecord],
    total_saved_tokens: int,
    skipped_running: int = 0,
    skipped_released: int = 0,
) -> str:
    """
    Format the summary shown to the model after a release.

    Args:
        files: One record per released tool call
        total_saved_tokens: Sum of estimated tokens freed
        skipped_running: Tool calls skipped because they had not finished
        skipped_released: Tool calls skipped because they were already released

    Returns:
        Multi-line summary text
    """
    lines = [f"✅ Successfully released {len(files)} tool call(s)"]

    if skipped_running > 0:
        lines.append(f"⏭️  Skipped {skipped_running} running tool(s) - must finish first")
    if skipped_released > 0:
        lines.append(f"⏭️  Skipped {skipped_released} already released tool(s)")

    lines.append("")
    lines.append("**Summary:**")

    for record in files:
        lines.append(f"- {record.path}")
        if record.lines is not None:
            lines.append(f"  Lines: {record.lines}")
        lines.append(f"  Saved: ~{record.savedTokens} tokens")

    lines.append("")
    lines.append(f"**Total saved:** ~{total_saved_tokens} tokens")

    return "\n".join(lines)
