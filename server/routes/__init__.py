"""
Route registration for the OpenCode API.
"""

from fastapi import FastAPI

from . import events, health, messages, sessions


def register_routes(app: FastAPI) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(events.router)
    app.include_router(health.router)
    sessions.register_routes(app)
    messages.register_routes(app)
