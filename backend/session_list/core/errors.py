"""Error Hierarchy — typed exceptions for the ways a session store can fail.

Invariants:
    - Each subclass fixes its code, category, severity, and HTTP status at class level
    - Validation / not-found errors map to 4xx; store and database failures to 5xx
    - to_response() and error_envelope() produce the same {"error": {...}} shape
    - Messages describe the failure kind, never driver output or SQL

Design Decisions:
    - Class attributes over constructor arguments: a subclass is its classification,
      callers only supply the message and optional context
    - Category drives the user-facing text (core/error_translator.py), not the class name
    - ErrorContext carries the session id / operation / page for logs and REST bodies
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Failure kinds the translator knows how to phrase."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    TIMEOUT = "timeout"
    CONNECTION = "connection"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where a failure happened: which session, which operation, which page."""
    session_id: str | None = None
    operation: str | None = None
    page: int | None = None
    debug_info: dict[str, Any] | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def as_fields(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "operation": self.operation,
            "page": self.page,
        }


def error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **fields: Any,
) -> dict:
    """REST error body shared by domain errors and the API's generic handlers."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **fields,
        },
    }


class SessionListError(Exception):
    """Base exception; subclasses set the class-level classification."""

    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    severity: ErrorSeverity = ErrorSeverity.ERROR
    http_status: int = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        return error_envelope(
            self.code, self.message, self.category, self.severity,
            timestamp=self.context.timestamp.isoformat(),
            context=self.context.as_fields(),
        )


# ─── Client-side failures (4xx) ─────────────────────────────────

class SessionValidationError(SessionListError):
    """Store input rejected (page size, title, ...)."""
    code = "VALIDATION_ERROR"
    category = ErrorCategory.VALIDATION
    http_status = 400

    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(message, context)
        self.field = field


class ResourceNotFoundError(SessionListError):
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(f"{resource_type} '{resource_id}' not found", context)
        self.resource_id = resource_id


# ─── Store-side failures (5xx) ──────────────────────────────────

class DatabaseError(SessionListError):
    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.CRITICAL
    http_status = 503

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(f"Database {operation} failed: {message}", context)
        self.operation = operation


class StoreTimeoutError(SessionListError):
    code = "STORE_TIMEOUT"
    category = ErrorCategory.TIMEOUT
    http_status = 504

    def __init__(self, operation: str, timeout_s: float, context: ErrorContext | None = None):
        super().__init__(f"Store {operation} timed out after {timeout_s:g}s", context)
        self.operation = operation
        self.timeout_s = timeout_s


class StoreUnavailableError(SessionListError):
    """Store backend (or the runtime in front of it) is not reachable."""
    code = "STORE_UNAVAILABLE"
    category = ErrorCategory.CONNECTION
    severity = ErrorSeverity.CRITICAL
    http_status = 503
