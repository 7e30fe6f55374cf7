"""Logging setup for the context server."""

import logging
import logging.config
import os
import time
from contextlib import contextmanager
from typing import Any, Iterator

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

FORMATS = {
    "simple": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    "detailed": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
}

# Third-party loggers held at WARNING unless the app runs at DEBUG
QUIET_LOGGERS = ("httpx", "httpcore", "anthropic", "uvicorn.access")


def build_logging_config(level_name: str) -> dict[str, Any]:
    """dictConfig for the given level name; unknown names fall back to INFO."""
    level_name = level_name.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = DEFAULT_LOG_LEVEL
    debug = level_name == "DEBUG"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            name: {"format": fmt, "datefmt": "%Y-%m-%d %H:%M:%S"}
            for name, fmt in FORMATS.items()
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "detailed" if debug else "simple",
            },
        },
        "root": {"level": level_name, "handlers": ["stdout"]},
        "loggers": {
            name: {"level": "DEBUG" if debug else "WARNING"} for name in QUIET_LOGGERS
        },
    }


def setup_logging(level: str | None = None) -> None:
    """Configure logging from ``level`` or the LOG_LEVEL env var."""
    level_name = level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logging.config.dictConfig(build_logging_config(level_name))


@contextmanager
def log_timing(
    logger: logging.Logger, operation: str, level: int = logging.DEBUG
) -> Iterator[None]:
    """Log how long the wrapped block took, even if it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.log(
            level, "%s took %.1fms", operation, (time.perf_counter() - start) * 1000
        )
