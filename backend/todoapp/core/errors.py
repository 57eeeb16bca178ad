"""Error Hierarchy - typed, categorized exceptions for every todo failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Client errors (NetworkError, UnexpectedResponseError) are raised only by client/
    - to_response() produces the REST envelope shared by server and client
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TodoAppError base: FastAPI global handler catches all,
      and the client maps envelopes back onto the same classes (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


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
    NETWORK = "network"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    todo_id: int | None = None


class TodoAppError(Exception):
    """Base exception for all todo application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int | None = 500,
        details: list[dict] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {"todo_id": self.context.todo_id},
        }
        if self.details:
            body["details"] = self.details
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class TitleValidationError(TodoAppError):
    """Title empty after sanitization or longer than the maximum."""
    def __init__(
        self,
        message: str,
        reason: str,
        field: str = "title",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
            details=[{"field": field, "message": message, "type": reason}],
        )
        self.field = field
        self.reason = reason


class IdMismatchError(TodoAppError):
    """Path id and body id of an update disagree."""
    def __init__(
        self, path_id: int, body_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.todo_id = path_id
        super().__init__(
            f"Path id {path_id} does not match body id {body_id}",
            "ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.path_id = path_id
        self.body_id = body_id


class ResourceNotFoundError(TodoAppError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TodoAppError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Client Errors ──────────────────────────────────────────────

class NetworkError(TodoAppError):
    """Request never produced an HTTP response (connection refused, DNS, reset)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NETWORK_ERROR", ErrorCategory.NETWORK,
            ErrorSeverity.ERROR, context, None,
        )


class UnexpectedResponseError(TodoAppError):
    """Server answered with a status the client has no mapping for."""
    def __init__(
        self,
        message: str,
        status_code: int,
        code: str = "UNEXPECTED_RESPONSE",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, status_code,
        )
