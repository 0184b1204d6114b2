"""Error Hierarchy — typed, categorized exceptions for all friendgraph failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are client-visible; infrastructure errors (5xx) are critical
    - to_response() produces the {success, error_message, error} REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FriendGraphError base: FastAPI global handler catches all
    - Idempotency violations (already friends/subscribed/blocked) map to 409, distinct
      from StoreError (503) so clients can tell "nothing to do" from "try later"
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    email: str | None = None


class FriendGraphError(Exception):
    """Base exception for all friendgraph errors."""

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
            "success": False,
            "error_message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "operation": self.context.operation,
            },
        }


# ─── Domain Errors (4xx) ────────────────────────────────────────

class UserNotFoundError(FriendGraphError):
    """An email does not resolve to a known user."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.email = email
        super().__init__(
            f"User '{email}' not found",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.email = email


class UserAlreadyExistsError(FriendGraphError):
    """A user with this email is already registered."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            f"User '{email}' already exists",
            "USER_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.email = email


class AlreadyFriendsError(FriendGraphError):
    """Friendship already exists for the unordered pair."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "They are already friends",
            "ALREADY_FRIENDS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class AlreadySubscribedError(FriendGraphError):
    """Subscription already exists for the ordered pair."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Requestor is already subscribed to target",
            "ALREADY_SUBSCRIBED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class AlreadyBlockedError(FriendGraphError):
    """Block already exists for the ordered pair."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Requestor has already blocked target",
            "ALREADY_BLOCKED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class InvalidRelationshipError(FriendGraphError):
    """Relationship request is structurally invalid (e.g. befriending oneself)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_RELATIONSHIP", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class StoreError(FriendGraphError):
    """Persistence operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation


class OperationTimeoutError(FriendGraphError):
    """Operation exceeded its request deadline."""
    def __init__(self, operation: str, seconds: float, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"{operation} did not complete within {seconds:g}s",
            "OPERATION_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, ctx, 504,
        )
        self.operation = operation
        self.seconds = seconds
