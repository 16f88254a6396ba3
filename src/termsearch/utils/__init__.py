"""
Utility modules for termsearch.

- error_handling: error taxonomy raised by the engine
- logging_config: logging facade and formatters
- formatter: text, JSON and rich console rendering of results
"""

from .error_handling import (
    AmbiguousComparisonError,
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
    FrozenScoreError,
    SearchError,
    SourceTypeError,
)
from .logging_config import (
    LogFormat,
    LogLevel,
    SearchLogger,
    configure_logging,
    disable_logging,
    enable_debug_logging,
    get_logger,
)

__all__ = [
    # Errors
    "SearchError",
    "ConfigurationError",
    "FrozenScoreError",
    "AmbiguousComparisonError",
    "SourceTypeError",
    "ErrorCategory",
    "ErrorSeverity",
    # Logging
    "LogFormat",
    "LogLevel",
    "SearchLogger",
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    "get_logger",
]
