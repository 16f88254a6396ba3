"""
Error taxonomy for termsearch.

The engine performs no I/O, so the set of failures is small. Every error the
library raises derives from ``SearchError``, which carries a category, a
severity, optional recovery suggestions and a free-form context dictionary
that ends up in structured log output.

Error Categories:
    - CONFIGURATION: invalid search construction (empty scorer list, bad limit)
    - STATE: misuse of a frozen score accumulator
    - VALIDATION: invalid arguments handed to diagnostic helpers or entry points

Classes:
    ErrorSeverity: Error severity levels (LOW, MEDIUM, HIGH, CRITICAL)
    ErrorCategory: Error classification categories
    SearchError: Base exception class for termsearch errors
    ConfigurationError: Raised when a search cannot be constructed
    FrozenScoreError: Raised when a boost is appended to a computed score
    AmbiguousComparisonError: Raised by diagnostic token-check comparisons
    SourceTypeError: Raised when a synchronous entry point gets an async source

Example:
    >>> from termsearch.utils.error_handling import ConfigurationError
    >>> try:
    ...     FullTextSearch.scoring("john", items, tokenize, scorers=[])
    ... except ConfigurationError as e:
    ...     print(e.context["field"])
    scorers
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    CONFIGURATION = "configuration"
    STATE = "state"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class SearchError(Exception):
    """Base exception for search-related errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        suggestions: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.suggestions: list[str] = suggestions or []
        self.context: dict[str, Any] = context or {}
        self.timestamp: float = time.time()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": type(self).__name__,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "suggestions": list(self.suggestions),
            "context": dict(self.context),
        }


class ConfigurationError(SearchError):
    """Configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            suggestions=[
                "Provide at least one scorer",
                "Use a non-negative result limit",
                "Pass a callable tokenizer",
            ],
            context=context,
        )


class FrozenScoreError(SearchError):
    """A boost was appended to a score that has already been calculated."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.STATE,
            severity=ErrorSeverity.HIGH,
            suggestions=["Run every scorer before reading the score value"],
            context=context,
        )


class AmbiguousComparisonError(SearchError):
    """Two token checks of incompatible representations were compared."""

    def __init__(self, other: Any) -> None:
        super().__init__(
            f"Can't compare to {type(other).__name__}",
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            context={"other_type": type(other).__name__},
        )


class SourceTypeError(SearchError):
    """A synchronous entry point was used with an asynchronous item source."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            suggestions=["Use aresults(), aexecute() or afind_results() for async sources"],
            context=context,
        )
