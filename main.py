"""
Run the context server with uvicorn.

Environment:
    HOST, PORT       bind address (default 0.0.0.0:8000)
    ANTHROPIC_MODEL  model ID, overriding the config file
    LOG_LEVEL        root log level (default INFO)
"""
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from agent import create_agent
from config import get_config, get_working_directory
from server import app, set_agent
from server.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    config = get_config()
    logger.info(
        "Serving %s; release_context %s, default count %d",
        get_working_directory(),
        "on" if config.tools.release_context else "off",
        config.release.default_count,
    )
    set_agent(create_agent(model_id=os.environ.get("ANTHROPIC_MODEL") or config.model))
    try:
        yield
    finally:
        set_agent(None)


app.router.lifespan_context = lifespan


def main() -> None:
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
