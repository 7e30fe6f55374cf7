"""
Shared pytest fixtures for all tests.
"""
import time
from typing import Any, Callable

import pytest

from config import get_config
from core.models import MessageWithParts, Session, SessionTime
from core.state import session_messages, sessions

SESSION_ID = "ses_test"
NO_TITLE = object()


@pytest.fixture(autouse=True)
def clear_state(monkeypatch, tmp_path):
    """Start every test with empty session storage and a fresh config."""
    monkeypatch.setenv("HOME", str(tmp_path))
    sessions.clear()
    session_messages.clear()
    get_config.cache_clear()
    yield
    sessions.clear()
    session_messages.clear()
    get_config.cache_clear()


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up mock environment variables for testing."""
    # Set a test API key to avoid requiring real credentials
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key-123")
    return monkeypatch


@pytest.fixture
def tool_part() -> Callable[..., dict[str, Any]]:
    """Factory for tool part dictionaries in any state."""

    def factory(
        call_id: str,
        tool: str = "bash",
        status: str = "completed",
        output: str = "ok",
        title: Any = NO_TITLE,
    ) -> dict[str, Any]:
        if status == "completed":
            state = {
                "status": "completed",
                "input": {"command": f"run {call_id}"},
                "output": output,
                "title": f"{tool} {call_id}" if title is NO_TITLE else title,
                "time": {"start": 1.0, "end": 2.0},
            }
        elif status == "running":
            state = {"status": "running", "input": {}, "time": {"start": 1.0}}
        elif status == "pending":
            state = {"status": "pending", "input": {}, "raw": ""}
        else:
            state = {
                "status": "error",
                "input": {},
                "error": "boom",
                "time": {"start": 1.0, "end": 2.0},
            }
        return {
            "id": f"prt_{call_id}",
            "sessionID": SESSION_ID,
            "messageID": "",
            "type": "tool",
            "callID": call_id,
            "tool": tool,
            "state": state,
        }

    return factory


def _assistant_message(index: int, parts: list[dict[str, Any]]) -> dict[str, Any]:
    message_id = f"msg_{index:03d}"
    return {
        "info": {
            "id": message_id,
            "sessionID": SESSION_ID,
            "role": "assistant",
            "time": {"created": float(index)},
            "parentID": "msg_user",
            "modelID": "test-model",
            "providerID": "test",
            "mode": "normal",
            "path": {"cwd": "/tmp", "root": "/tmp"},
            "cost": 0.0,
            "tokens": {"input": 0, "output": 0},
        },
        "parts": [{**part, "messageID": message_id} for part in parts],
    }


@pytest.fixture
def conversation() -> Callable[..., list[MessageWithParts]]:
    """Factory building a conversation snapshot; one list of parts per message."""

    def factory(*messages: list[dict[str, Any]]) -> list[MessageWithParts]:
        return [
            MessageWithParts.model_validate(_assistant_message(idx, parts))
            for idx, parts in enumerate(messages)
        ]

    return factory


@pytest.fixture
def seed_session(conversation) -> Callable[..., str]:
    """Factory storing a conversation under SESSION_ID; returns the session ID."""

    def factory(*messages: list[dict[str, Any]]) -> str:
        now = time.time()
        sessions[SESSION_ID] = Session(
            id=SESSION_ID,
            projectID="default",
            directory="/tmp",
            title="Test Session",
            version="1.0.0",
            time=SessionTime(created=now, updated=now),
        )
        session_messages[SESSION_ID] = [msg.model_dump() for msg in conversation(*messages)]
        return SESSION_ID

    return factory


@pytest.fixture
def stored_part() -> Callable[[str], dict[str, Any]]:
    """Look up a stored tool part by call ID."""

    def lookup(call_id: str) -> dict[str, Any]:
        for msg in session_messages[SESSION_ID]:
            for part in msg["parts"]:
                if part.get("callID") == call_id:
                    return part
        raise KeyError(call_id)

    return lookup
