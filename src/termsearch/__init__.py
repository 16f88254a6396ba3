"""
termsearch: In-memory fuzzy term matching and ranking for arbitrary Python objects.

Given a free-text query and a sequence of items, termsearch decides which items
match the query, scores how well each one matches and returns the items ordered
best-match-first. Items are reduced to searchable tokens by a caller-supplied
tokenizer, so any object can be searched: contacts, products, file names,
records loaded from JSON.

Key Features:
    - **Priority-ordered matchers**: exact, prefix and substring matching, where
      the strongest matcher wins for each term/token pair
    - **Pluggable scoring**: additive and percent boosts, built-in scorers for
      term coverage, match quality and named-token weighting
    - **Match-all filtering**: require every query term to match
    - **Sync and async sources**: iterate lists, generators or async generators
    - **Explainable results**: every result records which term matched which token
    - **Rich output**: text, JSON and console table rendering, plus a CLI

Main Classes:
    FullTextSearch: Executes a search over an item source
    SearchConfig: Query text and behavior switches
    Token: A normalized, optionally named searchable unit
    TermSearchResult: One item's matches and score
    Boost, Score: Scoring contributions and their accumulator

Example Usage:
    Basic API usage:
        >>> from termsearch import FullTextSearch
        >>> contacts = [
        ...     {"name": "John Bob Richards", "city": "Phoenix"},
        ...     {"name": "Joe John Johnson", "city": "Johns Creek"},
        ... ]
        >>> search = FullTextSearch(
        ...     "john", contacts, tokenize=lambda c: [c["name"], c["city"]]
        ... )
        >>> [c["name"] for c in search.find_results()]
        ['Joe John Johnson', 'John Bob Richards']

    Weighting named tokens:
        >>> from termsearch import Boost, BoostTokenScoring, TokenList
        >>> def tokenize(contact):
        ...     tokens = TokenList()
        ...     tokens.add_token(contact["name"], "name")
        ...     tokens.add_token(contact["city"], "city")
        ...     return tokens
        >>> search = FullTextSearch(
        ...     "john", contacts, tokenize,
        ...     additional_scorers=[BoostTokenScoring({"name": Boost.of_amount(2.0)})],
        ... )

    CLI usage:
        $ termsearch find "mac g" --file people.json --field name --limit 5
"""

from .core.api import FullTextSearch
from .core.config import SearchConfig
from .core.types import (
    Boost,
    MatchKind,
    OutputFormat,
    Score,
    SearchOutcome,
    SearchStats,
    TermMatch,
    TermSearchResult,
    Token,
    TokenizedItem,
    TokenList,
    split_query_terms,
)
from .search import (
    BoostTokenScoring,
    ContainsMatch,
    EqualsMatch,
    MatchAllTermsScoring,
    MatchedTermsScoring,
    MatchedTokensScoring,
    SearchScoring,
    StartsWithMatch,
    TermMatcher,
    top_scores,
)
from .utils.error_handling import (
    AmbiguousComparisonError,
    ConfigurationError,
    FrozenScoreError,
    SearchError,
    SourceTypeError,
)
from .utils.logging_config import (
    configure_logging,
    disable_logging,
    enable_debug_logging,
    get_logger,
)

# Package metadata
__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "In-memory fuzzy term matching and ranking for arbitrary Python objects"

# Public API
__all__ = [
    # Main classes
    "FullTextSearch",
    "SearchConfig",
    # Data types
    "Token",
    "TokenList",
    "TokenizedItem",
    "TermMatch",
    "MatchKind",
    "TermSearchResult",
    "SearchOutcome",
    "SearchStats",
    "OutputFormat",
    "Boost",
    "Score",
    "split_query_terms",
    # Strategies
    "TermMatcher",
    "EqualsMatch",
    "StartsWithMatch",
    "ContainsMatch",
    "SearchScoring",
    "MatchAllTermsScoring",
    "MatchedTermsScoring",
    "MatchedTokensScoring",
    "BoostTokenScoring",
    "top_scores",
    # Logging and configuration
    "configure_logging",
    "get_logger",
    "enable_debug_logging",
    "disable_logging",
    # Exception classes
    "SearchError",
    "ConfigurationError",
    "FrozenScoreError",
    "AmbiguousComparisonError",
    "SourceTypeError",
    # Package metadata
    "__version__",
    "__license__",
    "__description__",
]
