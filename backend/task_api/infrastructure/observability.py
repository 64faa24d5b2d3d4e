"""Structured Logging — JSON formatter and request-scoped log context.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Lines emitted while a request is in flight carry its path, method, and request_count
    - Explicit extras on a record (task_id, error_code, status_code) win over bound context
    - JSON format in production, human-readable in development

Design Decisions:
    - ContextVar over passing extras everywhere: services and stores log without
      knowing about the request that triggered them
    - Context bound/reset by RequestBoundaryMiddleware only; reset restores the outer value
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any

EXTRA_FIELDS = (
    "path", "method", "request_count", "task_id", "error_code", "status_code",
)

_request_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "request_context", default=None,
)


def bind_request_context(**fields: Any) -> Token:
    """Add fields to the log context of the current request."""
    current = dict(_request_context.get() or {})
    current.update(fields)
    return _request_context.set(current)


def reset_request_context(token: Token) -> None:
    _request_context.reset(token)


def current_request_context() -> dict[str, Any]:
    return dict(_request_context.get() or {})


class JSONFormatter(logging.Formatter):
    """Format logs as JSON, merging the bound request context."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = current_request_context()
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is None:
                val = context.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
