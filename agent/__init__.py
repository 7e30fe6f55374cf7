"""
Pydantic AI Agent module.
Exports the agent factory and its tools.
"""
from .agent import create_agent
from .tools import RELEASE_CONTEXT_DESCRIPTION, SessionDeps, release_context

__all__ = [
    # Agent creation
    "create_agent",
    # Tools
    "release_context",
    "RELEASE_CONTEXT_DESCRIPTION",
    "SessionDeps",
]
