"""
Token estimation.

The release pipeline only needs a rough ``str -> int`` estimate; callers may
pass any function with the same shape.
"""

from typing import Callable

from .constants import BYTES_PER_TOKEN

TokenEstimator = Callable[[str], int]


def estimate_tokens(text: str) -> int:
    """
    Estimate token count for text.

    Uses a simple heuristic of ~4 UTF-8 bytes per token.

    Args:
        text: Text to estimate tokens for

    Returns:
        Estimated token count (0 for empty text)
    """
    if not text:
        return 0
    return len(text.encode("utf-8")) // BYTES_PER_TOKEN
