"""
HTTP server exposing sessions, messages and context release.
"""

from .app import app, create_app
from .state import get_agent, set_agent

__all__ = ["app", "create_app", "set_agent", "get_agent"]
