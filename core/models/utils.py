"""ID generation."""

import secrets


def gen_id(prefix: str) -> str:
    """Random ID with an OpenCode-style prefix such as ``ses_``."""
    return prefix + secrets.token_urlsafe(12)
