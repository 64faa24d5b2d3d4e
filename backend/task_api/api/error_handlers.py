"""Error Handlers — global exception handlers for the Task API.

Invariants:
    - TaskApiError → its own http_status with {"msg": ..., "error": {...}}
    - Unmatched route (404) → 400 {"msg": "Not Found <url>"} (legacy clients expect 400)
    - Other HTTPExceptions (405, ...) keep FastAPI's default rendering
    - Everything else falls through to RequestBoundaryMiddleware (500)

Design Decisions:
    - Two handlers: domain (TaskApiError) and routing (HTTPException)
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_api.core.errors import TaskApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_task_error_handler(app)
    _register_not_found_handler(app)


def _register_task_error_handler(app: FastAPI) -> None:
    """Register Task API domain/infrastructure error handler."""

    @app.exception_handler(TaskApiError)
    async def task_error_handler(request: Request, exc: TaskApiError):
        exc.context.path = request.url.path
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"TaskApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
                "task_id": exc.context.task_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_not_found_handler(app: FastAPI) -> None:
    """Register the catch-all for unmatched routes."""

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)
        logger.info(
            f"No route for {request.method} {request.url.path}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"msg": f"Not Found {request.url}"},
        )
