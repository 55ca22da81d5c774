"""Error Hierarchy — typed, categorized exceptions for all participation failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - str(error) is the user-facing message, verbatim (GraphQL surfaces it as-is)
    - to_response() produces the REST envelope; extensions feeds GraphQL error extensions

Design Decisions:
    - Single hierarchy with ParticipationError base: FastAPI global handler and the
      GraphQL error mask both key off it (ADR: uniform error shape)
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from app.core import messages_pt_br as msg


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


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    participant_id: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class ParticipationError(Exception):
    """Base exception for all participation errors."""

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

    @property
    def extensions(self) -> dict:
        """GraphQL error extensions (picked up by graphql-core from original_error)."""
        return {"code": self.code, "category": self.category.value}

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
                    "participant_id": self.context.participant_id,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidNameError(ParticipationError):
    """First or last name is empty after trimming."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            msg.NAME_REQUIRED, "INVALID_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class OutOfRangeError(ParticipationError):
    """Participation outside the closed interval [0, 100]."""
    def __init__(self, participation: float, context: ErrorContext | None = None):
        super().__init__(
            msg.PARTICIPATION_OUT_OF_RANGE, "OUT_OF_RANGE",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context, 400,
        )
        self.participation = participation


class QuotaExceededError(ParticipationError):
    """Admitting the participant would push the total above 100%."""
    def __init__(
        self, current_total: float, remaining: float,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            msg.quota_exceeded(current_total, remaining), "QUOTA_EXCEEDED",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, context, 400,
        )
        self.current_total = current_total
        self.remaining = remaining


class ParticipantNotFoundError(ParticipationError):
    """No participant stored under the requested id."""
    def __init__(self, participant_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.participant_id = participant_id
        super().__init__(
            msg.PARTICIPANT_NOT_FOUND, "PARTICIPANT_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ParticipationError):
    """Record store unavailable or operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
