"""
Scoring strategies for term search results.

Each scorer looks at one aggregated ``TermSearchResult`` and appends boosts to
its ``Score``. The built-in set rewards matching every term, the number of
matched terms and the quality of every matched token; ``BoostTokenScoring``
is opt-in and weights named tokens such as ``firstName``.

Key Types:
    SearchScoring: Base class for scorers
    MatchAllTermsScoring: 0.5 per term when every term matched
    MatchedTermsScoring: 1.0 per matched term
    MatchedTokensScoring: 1.3 / 1.0 / 0.85 per exact / prefix / substring match
    BoostTokenScoring: Fixed boosts for matches on named tokens

Example:
    >>> from termsearch.core.types import Boost
    >>> scorers = [*default_scorers(), BoostTokenScoring({"lastName": Boost.of_amount(2.0)})]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..core.types import Boost, MatchKind, Score, TermSearchResult

# Per-match multipliers applied by MatchedTokensScoring
MATCH_QUALITY_FACTORS: dict[str, float] = {
    MatchKind.EQUALS.value: 1.3,
    MatchKind.STARTS_WITH.value: 1.0,
    MatchKind.CONTAINS.value: 0.85,
}


class SearchScoring(ABC):
    """
    A scoring rule for search results.

    ``score_term`` inspects an aggregated result and appends boosts to its
    score. Scorers must not read the score value: the value is only computed
    after every scorer has run, at which point amounts are summed and the
    percent multipliers applied.
    """

    @property
    def key(self) -> str:
        return type(self).__name__

    @abstractmethod
    def score_term(self, result: TermSearchResult[Any], score: Score) -> None:
        """Append zero or more boosts for ``result`` to ``score``."""

    def __repr__(self) -> str:
        return f"{self.key}()"


class MatchAllTermsScoring(SearchScoring):
    """Boost results that matched every search term."""

    def __init__(self, factor: float = 0.5) -> None:
        self.factor = factor

    def score_term(self, result: TermSearchResult[Any], score: Score) -> None:
        if result.match_all:
            score += Boost.of_amount(len(result.matched_terms) * self.factor, "matchAll")


class MatchedTermsScoring(SearchScoring):
    """Linear boost for the number of search terms that matched."""

    def score_term(self, result: TermSearchResult[Any], score: Score) -> None:
        count = len(result.matched_terms)
        score += Boost.of_amount(float(count), lambda: f"terms_x{count}")


class MatchedTokensScoring(SearchScoring):
    """
    Boost every matched token, scaled by match quality.

    Exact matches weigh 1.3, prefix matches 1.0 and substring matches 0.85 of
    the base boost. Matches from unknown matcher keys add nothing.
    """

    def __init__(
        self,
        matched_token_boost: Boost | None = None,
        factors: Mapping[str, float] | None = None,
    ) -> None:
        self.matched_token_boost = matched_token_boost or Boost.of_amount(1.0, "tokenPrefix")
        self.factors = dict(MATCH_QUALITY_FACTORS if factors is None else factors)

    def score_term(self, result: TermSearchResult[Any], score: Score) -> None:
        for match in result.matched_tokens:
            factor = self.factors.get(match.key)
            if factor is None:
                continue
            if factor == 1.0:
                score += self.matched_token_boost
            else:
                score += self.matched_token_boost.times(factor, f"token_{match.key}")


class BoostTokenScoring(SearchScoring):
    """
    Boost matches on specific named tokens, like ``firstName`` or ``lastName``.

    Only useful when the tokenizer produces named tokens.
    """

    def __init__(self, boosts: Mapping[str, Boost]) -> None:
        self.boosts = dict(boosts)

    def score_term(self, result: TermSearchResult[Any], score: Score) -> None:
        for match in result.matched_tokens:
            boost = self.boosts.get(match.token.name)
            if boost is not None:
                score += boost


def default_scorers() -> list[SearchScoring]:
    return [MatchAllTermsScoring(), MatchedTokensScoring(), MatchedTermsScoring()]
