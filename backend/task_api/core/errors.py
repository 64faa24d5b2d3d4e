"""Error Hierarchy — typed, categorized exceptions for all Task API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() keeps the {"msg": ...} envelope clients already parse
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Controllers raise, handlers map to HTTP status: each error carries its own status code
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class TaskApiError(Exception):
    """Base exception for all Task API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "msg": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "task_id": self.context.task_id,
                    "path": self.context.path,
                },
            },
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidTaskIdError(TaskApiError):
    """Route id missing or not an integer."""
    def __init__(self, raw_id: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            "Invalid task id", "INVALID_TASK_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw_id = raw_id


class InvalidTaskDataError(TaskApiError):
    """Request body missing, malformed, or not a JSON object."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid task data", "INVALID_TASK_DATA", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingDescripcionError(TaskApiError):
    """Create attempted without a descripcion."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Incorrect task descripcion. descripcion is required",
            "DESCRIPCION_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 422,
        )


class TaskNotFoundError(TaskApiError):
    """Requested task does not exist."""
    def __init__(self, task_id: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.task_id = str(task_id)
        super().__init__(
            f"Task with ID {task_id} not found",
            "TASK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.task_id = task_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
