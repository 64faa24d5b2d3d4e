"""Request Boundary — per-request counter, access log, and last-resort error catch.

Invariants:
    - Counter increments exactly once per request, including failing ones
    - Any exception escaping the app becomes a 500 with a {"msg": ...} body
    - Raw exception text only reaches the client when expose_error_details is on
    - Path, method, and request_count bound to the log context for the whole request

Design Decisions:
    - RequestCounter lives on app.state, not a module global: injected, lock-protected
    - Middleware over an Exception handler: ServerErrorMiddleware re-raises after
      responding, which breaks in-process clients (ADR: boundary owns the 500)
"""

import logging
import threading

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from task_api.infrastructure.observability import (
    bind_request_context, reset_request_context,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class RequestCounter:
    """Process-wide request counter, safe under threaded hosts."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0


class RequestBoundaryMiddleware(BaseHTTPMiddleware):
    """Count, log, and catch every request."""

    async def dispatch(self, request: Request, call_next):
        counter: RequestCounter = request.app.state.request_counter
        count = counter.increment()
        token = bind_request_context(
            path=request.url.path, method=request.method, request_count=count,
        )
        try:
            logger.info(f"Request {request.method} {request.url.path} => {count}")
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
            )
            expose = getattr(request.app.state, "expose_error_details", False)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"msg": str(exc) if expose else GENERIC_ERROR_MESSAGE},
            )
        finally:
            reset_request_context(token)
