"""
Unified Exception Hierarchy for Content Intelligence.

The analysis engines themselves never raise on malformed content; they degrade
to safe defaults. These exceptions are raised only at the boundaries: when
caller payloads are parsed into domain objects, when caller-supplied modes are
coerced into enums, and when configuration is read.

Exception Hierarchy:
    ContentIntelError (base)
    ├── ValidationError
    │   ├── InvalidItemError
    │   ├── InvalidQueryError
    │   └── InvalidParameterError
    ├── DataError
    │   └── ParseError
    └── ConfigurationError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    WARNING = auto()  # Recoverable, caller can fix input
    ERROR = auto()  # Failed operation
    CRITICAL = auto()  # Cannot continue


class ErrorCategory(Enum):
    """Categories for error classification."""

    VALIDATION = "validation"
    DATA = "data"
    CONFIGURATION = "config"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context for error messages."""

    tool_name: str | None = None
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    example: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def merged(self, **overrides: Any) -> ErrorContext:
        """Return a copy with the given fields replaced."""
        values = {
            "tool_name": self.tool_name,
            "operation": self.operation,
            "input_value": self.input_value,
            "suggestion": self.suggestion,
            "example": self.example,
            "metadata": self.metadata,
        }
        values.update(overrides)
        return ErrorContext(**values)


class ContentIntelError(Exception):
    """
    Base exception for all Content Intelligence errors.

    Provides:
    - Structured error context
    - Severity classification
    - Agent-friendly formatting
    """

    __slots__ = ("category", "context", "severity")

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.DATA,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }
        if self.context.tool_name:
            result["tool"] = self.context.tool_name
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        if self.context.example:
            result["example"] = self.context.example
        return result

    def to_agent_message(self) -> str:
        """Format for Agent consumption (Markdown)."""
        parts = [f"**Error**: {self}"]
        if self.context.suggestion:
            parts.append(f"**Suggestion**: {self.context.suggestion}")
        if self.context.example:
            parts.append(f"**Example**: `{self.context.example}`")
        return "\n".join(parts)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(ContentIntelError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
        )


class InvalidItemError(ValidationError):
    """Raised when a content item payload cannot be turned into a ContentItem."""

    def __init__(
        self,
        reason: str,
        *,
        item_id: Any = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = (context or ErrorContext()).merged(
            input_value=item_id,
            suggestion=(context.suggestion if context else None)
            or "Each item needs an 'id', a 'title' and an ISO-8601 'created_at'",
            example=(context.example if context else None)
            or '{"id": "1", "title": "React Hooks Guide", "created_at": "2024-05-01T10:00:00Z"}',
        )
        label = f" {item_id!r}" if item_id is not None else ""
        super().__init__(f"Invalid item{label}: {reason}", context=ctx)


class InvalidQueryError(ValidationError):
    """Raised when a search query is not a string."""

    def __init__(
        self,
        query: Any,
        reason: str = "Query must be text",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = (context or ErrorContext()).merged(
            input_value=query,
            suggestion=(context.suggestion if context else None) or "Provide the query as plain text",
            example=(context.example if context else None) or 'search_content(query="react hooks", items_json="[...]")',
        )
        super().__init__(f"Invalid query: {reason}", context=ctx)


class InvalidParameterError(ValidationError):
    """Raised when a parameter value is invalid."""

    def __init__(
        self,
        param_name: str,
        value: Any,
        expected: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = (context or ErrorContext()).merged(
            input_value=value,
            suggestion=f"Expected {expected}",
        )
        super().__init__(
            f"Invalid parameter '{param_name}': {value!r} (expected {expected})",
            context=ctx,
        )


# =============================================================================
# Data Errors
# =============================================================================


class DataError(ContentIntelError):
    """Base class for data-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.DATA,
        )


class ParseError(DataError):
    """Raised when a serialized payload cannot be decoded."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        full_msg = f"Parse error: {message}"
        if source:
            full_msg = f"Parse error ({source}): {message}"
        super().__init__(full_msg, context=context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ContentIntelError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
        )
