"""Error Hierarchy — typed, categorized exceptions for the dispatch and HTTP shell.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Operations in string_ops never raise these: the string core is total
    - All errors are caller errors (400-level family): recoverable, never CRITICAL
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with FormalismsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ARITHMETIC = "arithmetic"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    module: str | None = None
    operation: str | None = None
    case_id: str | None = None
    debug_info: dict[str, Any] | None = None


class FormalismsError(Exception):
    """Base exception for all library shell errors."""

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
                    "module": self.context.module,
                    "operation": self.context.operation,
                    "case_id": self.context.case_id,
                },
            }
        }


# ─── Caller Errors ──────────────────────────────────────────────

class UnknownOperationError(FormalismsError):
    """No operation registered under (module, name)."""
    def __init__(self, module: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.module, ctx.operation = module, operation
        super().__init__(
            f"Operation '{module}.{operation}' does not exist",
            "UNKNOWN_OPERATION", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class OperationArgumentError(FormalismsError):
    """Arguments do not match the operation signature (arity or kind)."""
    def __init__(
        self, module: str, operation: str, reason: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.module, ctx.operation = module, operation
        super().__init__(
            f"Invalid arguments for '{module}.{operation}': {reason}",
            "INVALID_ARGUMENTS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.reason = reason


class ArithmeticOperationError(FormalismsError):
    """An arithmetic operation signalled an error condition (modulo by zero)."""
    def __init__(
        self, module: str, operation: str, message: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.module, ctx.operation = module, operation
        super().__init__(
            f"Arithmetic error in '{module}.{operation}': {message}",
            "ARITHMETIC_ERROR", ErrorCategory.ARITHMETIC,
            ErrorSeverity.WARNING, ctx, 422,
        )


class UnknownCaseError(FormalismsError):
    """Requested built-in conformance case does not exist."""
    def __init__(self, case_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.case_id = case_id
        super().__init__(
            f"Conformance case '{case_id}' not found",
            "CASE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
