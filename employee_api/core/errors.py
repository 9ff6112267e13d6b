"""Error Hierarchy — typed, categorized exceptions for every Employee API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; upstream errors are 500-level
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmployeeApiError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    upstream_url: str | None = None
    upstream_status: int | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class EmployeeApiError(Exception):
    """Base exception for all Employee API errors."""

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
                    "employee_id": self.context.employee_id,
                    "upstream_status": self.context.upstream_status,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmployeeNotFoundError(EmployeeApiError):
    """No employee exists for the requested id."""
    def __init__(self, employee_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Employee not found for ID: {employee_id}",
            "EMPLOYEE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.employee_id = employee_id


# ─── Upstream Errors (500-level) ────────────────────────────────

class UpstreamUnavailableError(EmployeeApiError):
    """Upstream could not be reached, timed out, throttled us, or failed (5xx)."""
    def __init__(
        self,
        message: str,
        reason: str,
        retry_after_ms: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_ms = retry_after_ms
        category = (
            ErrorCategory.TIMEOUT if reason == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"Upstream unavailable ({reason}): {message}",
            "UPSTREAM_UNAVAILABLE", category,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.reason = reason


class UpstreamResponseError(EmployeeApiError):
    """Upstream answered, but not with something we can use."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unexpected upstream response: {message}",
            "UPSTREAM_BAD_RESPONSE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
