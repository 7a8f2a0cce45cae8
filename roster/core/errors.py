"""Error Hierarchy — typed, categorized exceptions for rendering store outcomes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The store never raises these: routes build them from a failed StoreResult
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with RosterError base: one FastAPI handler catches all
    - error_from_result keeps the StoreOutcome → HTTP mapping in one place
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from roster.core.domain_types import StoreOutcome, StoreResult


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
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: str | None = None
    operation: str | None = None


class RosterError(Exception):
    """Base exception for all roster errors."""

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
                    "record_id": self.context.record_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RecordValidationError(RosterError):
    """A record field failed its constraint."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class DuplicateRecordError(RosterError):
    """A record with the same (case-insensitive) id already exists."""
    def __init__(self, record_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Record '{record_id}' already exists",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class ResourceNotFoundError(RosterError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


def error_from_result(
    result: StoreResult, record_id: str, operation: str,
) -> RosterError:
    """Map a failed StoreResult to the error the shell raises."""
    context = ErrorContext(record_id=record_id, operation=operation)
    if result.outcome is StoreOutcome.DUPLICATE_KEY:
        return DuplicateRecordError(record_id.strip(), context)
    if result.outcome is StoreOutcome.INVALID_FIELD:
        field_name = result.field.value if result.field else "unknown"
        return RecordValidationError(result.message, field_name, context)
    if result.outcome is StoreOutcome.NOT_FOUND:
        return ResourceNotFoundError("Record", record_id.strip(), context)
    raise ValueError(f"StoreResult is not a failure: {result.outcome.value}")
