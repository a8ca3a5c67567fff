"""Error Hierarchy — typed, categorized exceptions for the server-data gate.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Gate outcomes (missing auth, empty users, ...) are NEVER errors; they are False
    - Errors here are caller-contract violations or malformed input only
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ServerDataGateError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability without coupling to logging
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
    PRECONDITION = "precondition"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    account: str | None = None
    field_path: str | None = None


class ServerDataGateError(Exception):
    """Base exception for all server-data gate errors."""

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
                    "account": self.context.account,
                    "field": self.context.field_path,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class SnapshotDecodeError(ServerDataGateError):
    """A state snapshot could not be decoded into account state."""
    def __init__(self, message: str, field_path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_path = field_path
        super().__init__(
            f"Invalid state snapshot at '{field_path}': {message}",
            "SNAPSHOT_DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field_path = field_path


# ─── Contract Violations (500-level) ────────────────────────────

class MissingAccountStateError(ServerDataGateError):
    """Per-account gate called without a bundle. Use the global gate instead."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Per-account server-data check requires an account state; "
            "use get_have_server_data_global when there may be no active account.",
            "MISSING_ACCOUNT_STATE", ErrorCategory.PRECONDITION,
            ErrorSeverity.CRITICAL, context, 500,
        )
