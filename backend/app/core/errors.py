"""Error Hierarchy — typed, categorized exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are caller mistakes; infrastructure errors (500-level)
      come from the hosted database or the email provider
    - to_response() produces the REST envelope used by every route
    - debug_info never reaches the response body; only `details` does

Design Decisions:
    - Single hierarchy with StarterError base: one global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
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
    CONFIGURATION = "configuration"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class StarterError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: Any = None,
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
        }
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidTemplateError(StarterError):
    """Template selection cannot produce an email body."""
    def __init__(self, template: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid template or missing custom HTML",
            "INVALID_TEMPLATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.template = template


class ResourceNotFoundError(StarterError):
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

class DatabaseError(StarterError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class DatabaseNotConfiguredError(StarterError):
    """DATABASE_URL is not set."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Database not configured. Add DATABASE_URL to .env",
            "DATABASE_NOT_CONFIGURED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class EmailNotConfiguredError(StarterError):
    """RESEND_API_KEY is not set."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email service not configured. Add RESEND_API_KEY to .env",
            "EMAIL_NOT_CONFIGURED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 500,
        )


class EmailProviderError(StarterError):
    """Email provider call failed."""
    def __init__(
        self,
        message: str,
        provider_error_type: str,
        details: Any = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Failed to send email ({provider_error_type}): {message}",
            "EMAIL_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500, details,
        )
        self.provider_error_type = provider_error_type
