"""Request logging middleware."""

import logging
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

SLOW_REQUEST_MS = 1000
SESSION_PATH = re.compile(r"^/session/([^/]+)")


def request_log_level(status: int, duration_ms: float) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400 or duration_ms > SLOW_REQUEST_MS:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request.

    Requests under ``/session/{id}`` are tagged with the session ID.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        match = SESSION_PATH.match(path)
        logger.log(
            request_log_level(response.status_code, duration_ms),
            "%s %s -> %d (%.1fms)%s",
            request.method,
            path,
            response.status_code,
            duration_ms,
            f" [{match.group(1)}]" if match else "",
        )
        return response
