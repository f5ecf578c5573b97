"""Error Hierarchy — typed, categorized exceptions for all resume site failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Content errors are fatal at load time; contact errors are recovered by the contact service
    - to_response() produces the REST envelope used by the global handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ResumeSiteError base: FastAPI global handler catches all
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
    BUSINESS_RULE = "business_rule"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ResumeSiteError(Exception):
    """Base exception for all resume site errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Content Errors ─────────────────────────────────────────────

class ContentValidationError(ResumeSiteError):
    """Resume document failed to load or failed shape validation. Fatal."""
    def __init__(
        self,
        message: str,
        problems: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Resume content is unavailable"
        super().__init__(
            message, "CONTENT_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.problems = problems or []


# ─── Contact Form Errors ────────────────────────────────────────

class SpamRejectionError(ResumeSiteError):
    """Honeypot field was filled in; the submission is treated as spam."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Spam detected. Please try again.",
            "SPAM_REJECTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class MissingFieldsError(ResumeSiteError):
    """One or more required contact fields are blank."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Please fill in all required fields.",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields


class FieldTooLongError(ResumeSiteError):
    """One or more contact fields exceed their length limit."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Some fields are too long. Please shorten them and try again.",
            "FIELD_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields


class ContactNotConfiguredError(ResumeSiteError):
    """No relay endpoint configured for the contact form."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Contact form is not configured. Please use direct contact methods.",
            "CONTACT_NOT_CONFIGURED", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, context, 503,
        )


class SubmissionError(ResumeSiteError):
    """Relay POST failed (transport error or non-2xx response)."""
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or (
            "Failed to send message. Please try again or use direct contact methods."
        )
        super().__init__(
            f"Form relay failed: {message}",
            "SUBMISSION_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, 502,
        )
        self.status_code = status_code
