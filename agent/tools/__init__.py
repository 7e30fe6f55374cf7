"""Tools for the agent."""

from .release import RELEASE_CONTEXT_DESCRIPTION, SessionDeps, release_context

__all__ = [
    # Context tools
    "release_context",
    "RELEASE_CONTEXT_DESCRIPTION",
    "SessionDeps",
]
