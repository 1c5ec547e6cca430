"""Error Hierarchy: typed, categorized exceptions for every mock API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable, expected outcomes, never faults
    - to_response() produces the Boom-compatible envelope:
      {"statusCode": int, "error": reason phrase, "message": str}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MockApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Missing user maps to 400, not 404: the mocked API answers that way and
      front-end code is written against it (ADR: wire compatibility)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from http import HTTPStatus
from typing import Any


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


def build_error_body(status_code: int, message: str) -> dict:
    """Response envelope shared by domain errors and framework errors."""
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Unknown"
    return {"statusCode": status_code, "error": reason, "message": message}


class MockApiError(Exception):
    """Base exception for all mock API errors."""

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
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return build_error_body(self.http_status, self.message)


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(MockApiError):
    """Request payload violated a schema rule."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class UserNotFoundError(MockApiError):
    """No user record carries the requested id."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource = "user"
        ctx.resource_id = user_id
        super().__init__(
            f"id {user_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.user_id = user_id
