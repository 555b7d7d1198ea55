"""Error Hierarchy — typed, categorized exceptions for all PharmaDB failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are local to one mutation; callers may retry with corrected input
    - Infrastructure errors (500-level) are critical but never fatal to the process
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PharmaError base: FastAPI global handler catches all (uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    entity: str | None = None
    key: str | None = None
    debug_info: dict[str, Any] | None = None


class PharmaError(Exception):
    """Base exception for all PharmaDB errors."""

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
                "context": {
                    "operation": self.context.operation,
                    "entity": self.context.entity,
                    "key": self.context.key,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ReferenceNotFoundError(PharmaError):
    """A write names a parent/reference key that does not exist."""
    def __init__(
        self, entity: str, key: object, field: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.key = str(key)
        super().__init__(
            f"Referenced {entity} '{key}' (field '{field}') does not exist",
            "REFERENCE_NOT_FOUND", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.entity = entity
        self.key = key
        self.field = field


class InvariantViolationError(PharmaError):
    """A structural rule would be broken by the requested mutation."""
    def __init__(
        self, rule: str, message: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVARIANT_VIOLATION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.rule = rule


class NotFoundError(PharmaError):
    """Target row of an update/delete does not exist."""
    def __init__(
        self, entity: str, key: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.key = str(key)
        super().__init__(
            f"{entity} '{key}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.entity = entity
        self.key = key


class ConstraintViolationError(PharmaError):
    """Column-level constraint rejected by the store (CHECK, UNIQUE, FK)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Constraint violated: {message}",
            "CONSTRAINT_VIOLATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class UnknownOperationError(PharmaError):
    """Mutation API asked for an operation it does not register."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown operation '{operation}'",
            "UNKNOWN_OPERATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.operation = operation


class ConcurrencyError(PharmaError):
    """Concurrent modification detected (serialization failure)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PharmaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
