"""
Request Context Middleware.

Gives every request a correlation id, binds it (with method and path)
into structlog's context for all logs emitted while the request is
handled, and reports the handling time.

Response headers:
    X-Request-ID     the caller's id when supplied, otherwise a new uuid4
    X-Response-Time  whole milliseconds, e.g. "12ms"
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from modules.backend.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Correlation id, timing and log context for each request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(
                    "Request failed with exception",
                    extra={"duration_ms": _elapsed_ms(started), "error_type": type(exc).__name__},
                )
                raise

            duration_ms = _elapsed_ms(started)
            logger.debug(
                "Request completed",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms}ms"
        return response
