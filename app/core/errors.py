"""Error Hierarchy — typed, categorized exceptions for every subscription outcome.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError and ConflictError are caller-fixable (400/409)
    - InternalError (and DatabaseError) are not caller-fixable (500)
    - to_response() produces the REST body: {message} plus field when present
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LandingError base: FastAPI global handler catches all
    - DuplicateEmailError sits outside the hierarchy: it is a storage-level signal
      raised by repositories and translated by the service, never sent to HTTP
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


CONFLICT_MESSAGE = "Email already subscribed"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    debug_info: dict[str, Any] | None = None


class LandingError(Exception):
    """Base exception for all Landing API errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Caller Errors (400-level) ──────────────────────────────────

class ValidationError(LandingError):
    """Candidate input is malformed."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        body = {"message": self.message}
        if self.field is not None:
            body["field"] = self.field
        return body


class ConflictError(LandingError):
    """Email is already registered."""
    def __init__(
        self, message: str = CONFLICT_MESSAGE, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.INFO, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(LandingError):
    """Collaborator or environment fault."""
    def __init__(
        self,
        message: str = "Subscription could not be completed",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INTERNAL_ERROR", category,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            ErrorCategory.DATABASE, context,
        )
        self.code = "DATABASE_ERROR"
        self.operation = operation


# ─── Storage Signals ────────────────────────────────────────────

class DuplicateEmailError(Exception):
    """Raised by SubscriberRepository.insert when the unique constraint fires."""
    def __init__(self, email: str):
        super().__init__(f"subscriber with email {email!r} already exists")
        self.email = email
