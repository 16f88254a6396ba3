"""
Core type definitions for termsearch.

- basic_types: tokens, terms, match records, output formats and statistics
- score_types: boosts and the score accumulator
- result_types: per-item search results and execution outcomes
"""

from .basic_types import (
    SEARCH_TERM_DELIMITER,
    MatchKind,
    OutputFormat,
    SearchStats,
    TermMatch,
    Token,
    TokenizedItem,
    TokenList,
    coerce_token,
    coerce_tokens,
    split_query_terms,
)
from .result_types import SearchOutcome, TermSearchResult
from .score_types import Boost, Score, ScoreState, calculate_score

__all__ = [
    # Basic types
    "SEARCH_TERM_DELIMITER",
    "MatchKind",
    "OutputFormat",
    "SearchStats",
    "TermMatch",
    "Token",
    "TokenizedItem",
    "TokenList",
    "coerce_token",
    "coerce_tokens",
    "split_query_terms",
    # Scoring types
    "Boost",
    "Score",
    "ScoreState",
    "calculate_score",
    # Results
    "SearchOutcome",
    "TermSearchResult",
]
