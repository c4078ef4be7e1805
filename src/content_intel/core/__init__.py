"""
Core module for Content Intelligence.

Provides:
- Unified exception hierarchy
"""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    ContentIntelError,
    DataError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidItemError,
    InvalidParameterError,
    InvalidQueryError,
    ParseError,
    ValidationError,
)

__all__ = [
    "ContentIntelError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "ValidationError",
    "InvalidItemError",
    "InvalidQueryError",
    "InvalidParameterError",
    "DataError",
    "ParseError",
    "ConfigurationError",
]
