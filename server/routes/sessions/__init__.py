"""
Session routes: creation and context release.
"""

from fastapi import FastAPI

from . import create, release


def register_routes(app: FastAPI) -> None:
    app.include_router(create.router)
    app.include_router(release.router)
