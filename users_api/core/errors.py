"""Error Hierarchy — typed, categorized exceptions for Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No driver details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UsersApiError base: one FastAPI handler catches all
    - Statement failures (IntegrityError etc.) are NOT wrapped here: they propagate
      unchanged through repository and service, and the catch-all handler answers 500
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs; never rendered verbatim."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    user_id: str | None = None
    debug_info: dict[str, Any] | None = None


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UserNotCreatedError(UsersApiError):
    """The store accepted the request but reported no row written."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "create"
        ctx.user_id = user_id
        super().__init__(
            "User could not be created",
            "USER_NOT_CREATED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreConnectionError(UsersApiError):
    """Database could not be reached or opened. Never retried."""
    def __init__(self, database: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "connect"
        ctx.debug_info = {"database": database}
        super().__init__(
            "Database connection failed",
            "DATABASE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
