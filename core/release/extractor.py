"""
Metadata extraction for released tool outputs.

Extractors are registered per tool name. Tools without a dedicated
extractor fall back to ``extract_generic``.
"""

import re
from typing import Callable

from ..constants import UNKNOWN_TITLE
from ..exceptions import InvalidOperationError
from ..models import ReleaseRecord, ToolPart, ToolStateCompleted

Extractor = Callable[[str, str], ReleaseRecord]

END_OF_FILE_PATTERN = re.compile(r"\(End of file - total ([0-9]+) lines\)")
FILE_BLOCK_PATTERN = re.compile(r"<file>\n([\s\S]+?)\n</file>")

_extractors: dict[str, Extractor] = {}


def register_extractor(tool: str) -> Callable[[Extractor], Extractor]:
    """Decorator registering an extractor for outputs of ``tool``."""

    def decorator(func: Extractor) -> Extractor:
        _extractors[tool] = func
        return func

    return decorator


def get_extractor(tool: str) -> Extractor:
    """Return the extractor for ``tool``, or the generic one."""
    return _extractors.get(tool, extract_generic)


def byte_size(text: str) -> int:
    return len(text.encode("utf-8"))


def extract_generic(output: str, title: str) -> ReleaseRecord:
    return ReleaseRecord(path=title, size=byte_size(output))


@register_extractor("read")
def extract_read(output: str, title: str) -> ReleaseRecord:
    """
    Extract metadata from file read output.

    The line count comes from the ``(End of file - total N lines)`` footer
    when present, otherwise from the lines inside a ``<file>`` block. When
    neither is found the line count is left unset.
    """
    lines = None
    end_match = END_OF_FILE_PATTERN.search(output)
    if end_match:
        lines = int(end_match.group(1))
    else:
        block_match = FILE_BLOCK_PATTERN.search(output)
        if block_match:
            lines = len(block_match.group(1).split("\n"))

    return ReleaseRecord(path=title, size=byte_size(output), lines=lines)


def extract_metadata(part: ToolPart) -> ReleaseRecord:
    """
    Build the release record for a completed tool part.

    Raises:
        InvalidOperationError: If the part has not completed
    """
    if not isinstance(part.state, ToolStateCompleted):
        raise InvalidOperationError("Cannot extract metadata from non-completed tool")

    title = part.state.title or UNKNOWN_TITLE
    return get_extractor(part.tool)(part.state.output, title)
