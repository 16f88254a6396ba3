"""
Matching, scoring and ranking strategies.

- matchers: decide whether a token satisfies a search term
- scorer: turn aggregated match evidence into score boosts
- ranking: filter, order and truncate scored results
- inspection: diagnostic token/term comparisons
"""

from .inspection import TokenCheck, TokenCheckResult, check_token
from .matchers import (
    DEFAULT_MATCHER_PRIORITY,
    ContainsMatch,
    EqualsMatch,
    StartsWithMatch,
    TermMatcher,
    default_matchers,
    first_match,
    sort_matchers,
)
from .ranking import (
    limit_results,
    rank_results,
    sorted_by_score,
    top_scores,
    where_matched_all,
)
from .scorer import (
    MATCH_QUALITY_FACTORS,
    BoostTokenScoring,
    MatchAllTermsScoring,
    MatchedTermsScoring,
    MatchedTokensScoring,
    SearchScoring,
    default_scorers,
)

__all__ = [
    # Matchers
    "DEFAULT_MATCHER_PRIORITY",
    "TermMatcher",
    "EqualsMatch",
    "StartsWithMatch",
    "ContainsMatch",
    "default_matchers",
    "first_match",
    "sort_matchers",
    # Scoring
    "MATCH_QUALITY_FACTORS",
    "SearchScoring",
    "MatchAllTermsScoring",
    "MatchedTermsScoring",
    "MatchedTokensScoring",
    "BoostTokenScoring",
    "default_scorers",
    # Ranking
    "where_matched_all",
    "sorted_by_score",
    "limit_results",
    "rank_results",
    "top_scores",
    # Diagnostics
    "TokenCheck",
    "TokenCheckResult",
    "check_token",
]
