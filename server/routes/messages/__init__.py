"""
Message routes.
"""

from fastapi import FastAPI

from . import append, get, list


def register_routes(app: FastAPI) -> None:
    for module in (list, get, append):
        app.include_router(module.router)
