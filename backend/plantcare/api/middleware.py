"""
Request middleware for logging, timing, and request ID tracking.
"""

import re
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog

from plantcare.core.logging import get_logger

logger = get_logger(__name__)

# Client-supplied ids are echoed back only when they are short plain tokens.
REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Binds request_id, method, path and user agent to structlog's context so
    validation and service logs carry them, then logs the outcome with its
    duration. Client errors (4xx) are logged as warnings.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = _request_id(request.headers.get("X-Request-ID"))
        start_time = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            user_agent=request.headers.get("user-agent"),
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                error=str(e),
                duration_ms=_elapsed_ms(start_time),
            )
            raise

        duration_ms = _elapsed_ms(start_time)
        log = logger.warning if 400 <= response.status_code < 500 else logger.info
        log("request_completed", status_code=response.status_code, duration_ms=duration_ms)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms}ms"
        return response


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def _request_id(incoming: Optional[str]) -> str:
    if incoming and REQUEST_ID_PATTERN.fullmatch(incoming):
        return incoming
    return uuid.uuid4().hex[:8]
