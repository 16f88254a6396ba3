"""
Configuration module for termsearch.

This module defines the SearchConfig class holding the scalar options of one
search: the query text and the switches that shape matching, filtering and
result limiting. The item source, the tokenizer and the matcher/scorer
strategies are passed to ``FullTextSearch`` next to the config.

Classes:
    SearchConfig: Search options with validation

Example:
    >>> from termsearch.core.config import SearchConfig
    >>>
    >>> config = SearchConfig(query="Eric Martineau", match_all=True, limit=10)
    >>> config.validate()
    >>> config.has_query
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.error_handling import ConfigurationError


@dataclass(slots=True)
class SearchConfig:
    # Query text; split into terms on whitespace, hyphens and periods
    query: str = ""

    # Behavior
    # if True, only results that matched every query term are returned
    match_all: bool = False
    # if False, the startsWith matcher is left out of the matcher sequence
    starts_with: bool = True
    # if False, tokens and terms keep their case and matching is case-sensitive
    ignore_case: bool = True

    # Ranking
    limit: int | None = None  # None = return every qualifying result

    @property
    def has_query(self) -> bool:
        return bool(self.query and self.query.strip())

    def validate(self) -> None:
        """Validate the configuration and raise ConfigurationError on issues.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        if self.query is not None and not isinstance(self.query, str):
            raise ConfigurationError(
                "Query must be a string",
                context={"field": "query", "value": repr(self.query)},
            )

        if self.limit is not None and self.limit < 0:
            raise ConfigurationError(
                "Result limit must be non-negative (None = unlimited)",
                context={"field": "limit", "value": self.limit},
            )
