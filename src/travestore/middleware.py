"""FastAPI middleware for request tracing and access logging."""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from travestore.errors import error_handler
from travestore.logging import get_logger

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID and log its outcome.

    - Reads X-Request-ID from request headers, or generates a UUID if missing
    - Binds request_id to structlog context (auto-included in all logs)
    - Turns exceptions that escape the routes into the 500 error envelope
    - Logs one request_completed event with status and duration
    - Adds X-Request-ID to response headers
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await error_handler(request, exc)

        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
