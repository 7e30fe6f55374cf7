"""Placeholder text written in place of a released tool output."""

from datetime import datetime, timezone

from ..constants import RELEASED_PREFIX
from ..models import ReleaseRecord


def released_at() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_placeholder(tool: str, record: ReleaseRecord) -> str:
    lines = [f"{RELEASED_PREFIX} {tool}]", f"- Title: {record.path}"]

    if record.lines is not None:
        lines.append(f"- Lines: {record.lines}")

    size_kb = record.size / 1024
    lines.append(f"- Size: {record.size} bytes ({size_kb:.2f} KB)")

    if record.savedTokens is not None:
        lines.append(f"- Tokens saved: ~{record.savedTokens}")
    lines.append(f"- Released at: {released_at()}")

    return "\n".join(lines)
