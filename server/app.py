"""
FastAPI application for the context server.
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .middleware import RequestLoggingMiddleware
from .routes import register_routes

API_TITLE = "OpenCode Context API"
API_VERSION = "1.0.0"


def get_cors_origins() -> list[str]:
    """Origins from the comma-separated CORS_ORIGINS env var (default ``*``)."""
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app() -> FastAPI:
    application = FastAPI(title=API_TITLE, version=API_VERSION)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Outermost, so CORS preflights are logged too
    application.add_middleware(RequestLoggingMiddleware)
    register_routes(application)
    return application


app = create_app()
