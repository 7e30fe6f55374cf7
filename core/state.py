"""
Process-wide in-memory storage for sessions and their conversation logs.
"""

from typing import Any

from .models import Session

sessions: dict[str, Session] = {}

# session ID -> messages as {"info": ..., "parts": [...]}, oldest first
session_messages: dict[str, list[dict[str, Any]]] = {}
