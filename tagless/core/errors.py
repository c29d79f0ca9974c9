"""Error Hierarchy — typed, categorized exceptions for every tagless failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only two concrete kinds exist: DecodeError (bad tree input) and
      ArithmeticOverflowError (checked integer arithmetic)
    - DecodeError is recoverable (WARNING); overflow is an ERROR
    - to_dict() produces the structured envelope used by logs and callers

Design Decisions:
    - Single hierarchy with TaglessError base: one except clause catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field, replace
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
    ARITHMETIC = "arithmetic"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where in a tree or which interpretation an error came from."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tag: str | None = None
    path: tuple[int, ...] = ()
    interpretation: str | None = None
    debug_info: dict[str, Any] | None = None


class TaglessError(Exception):
    """Base exception for all tagless errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "tag": self.context.tag,
                    "path": list(self.context.path),
                    "interpretation": self.context.interpretation,
                },
            }
        }


# ─── Decode Errors (bad input, recoverable) ─────────────────────

class DecodeError(TaglessError):
    """A Generic Tree could not be decoded by the active decoder tier."""

    UNKNOWN_TAG = "UNKNOWN_TAG"
    WRONG_ARITY = "WRONG_ARITY"
    INVALID_LITERAL = "INVALID_LITERAL"
    UNEXPECTED_LEAF = "UNEXPECTED_LEAF"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"
    MALFORMED_TREE = "MALFORMED_TREE"

    def __init__(
        self,
        message: str,
        code: str,
        tag: str | None = None,
        path: tuple[int, ...] = (),
        context: ErrorContext | None = None,
    ):
        # The caller's context is never mutated.
        ctx = replace(context or ErrorContext(), tag=tag, path=tuple(path))
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.tag = tag
        self.path = tuple(path)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        where = "/".join(str(i) for i in self.path)
        return f"{self.message} (at /{where})"


# ─── Arithmetic Errors ──────────────────────────────────────────

class ArithmeticOverflowError(TaglessError, OverflowError):
    """Checked integer arithmetic left the configured signed range."""

    def __init__(
        self,
        operation: str,
        operands: tuple[int, ...],
        bits: int,
        context: ErrorContext | None = None,
    ):
        shown = ", ".join(str(n) for n in operands)
        super().__init__(
            f"Integer overflow in {operation}({shown}): "
            f"result does not fit in {bits}-bit signed range",
            "INTEGER_OVERFLOW", ErrorCategory.ARITHMETIC,
            ErrorSeverity.ERROR, context,
        )
        self.operation = operation
        self.operands = operands
        self.bits = bits
