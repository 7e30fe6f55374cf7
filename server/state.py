"""
Agent held by the running server.

Conversation storage lives in core.state; this only tracks the agent
created at startup.
"""

from pydantic_ai import Agent

_agent: Agent | None = None


def set_agent(new_agent: Agent | None) -> None:
    global _agent
    _agent = new_agent


def get_agent() -> Agent | None:
    return _agent
