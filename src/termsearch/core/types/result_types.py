"""
Search result types.

Key Types:
    TermSearchResult: One matched item with its term matches and score
    SearchOutcome: Ranked results of one execution plus SearchStats

Example:
    >>> outcome = search.execute_with_stats()
    >>> for result in outcome.results:
    ...     print(result.score_value, result.explain())
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .basic_types import SearchStats, TermMatch
from .score_types import Score

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TermSearchResult(Generic[T]):
    """
    The outcome of matching one item against the query terms.

    Only items with at least one term match become results. ``match_all`` is
    derived from the number of distinct matched terms and the size of the
    query's term set.

    Attributes:
        item: The original input item
        matched_terms: Distinct normalized terms that matched at least one token
        matched_tokens: Distinct term/token match records
        term_count: Number of distinct terms in the query
        score: Boost accumulator, frozen once the score value is read
    """

    item: T
    matched_terms: frozenset[str]
    matched_tokens: frozenset[TermMatch]
    term_count: int
    score: Score = field(default_factory=Score.zero, compare=False, repr=False)

    @classmethod
    def from_matches(
        cls, item: T, matches: Iterable[TermMatch], term_count: int
    ) -> TermSearchResult[T] | None:
        """Aggregate the matches of one item, or return None when there are none."""
        matched_tokens = frozenset(matches)
        if not matched_tokens:
            return None
        matched_terms = frozenset(match.term for match in matched_tokens)
        return cls(item, matched_terms, matched_tokens, term_count)

    @property
    def match_all(self) -> bool:
        return len(self.matched_terms) >= self.term_count

    @property
    def score_value(self) -> float:
        return self.score.calculate()

    def explain(self) -> list[str]:
        """Human-readable match records, sorted for stable output."""
        return sorted(match.explain() for match in self.matched_tokens)

    def __str__(self) -> str:
        return (
            f"TermSearchResult{{score: {self.score}, matchedTerms: {len(self.matched_terms)}, "
            f"matchedTokens: {len(self.matched_tokens)}, matchAll: {self.match_all}}}"
        )


@dataclass(slots=True)
class SearchOutcome(Generic[T]):
    """Ranked results of one execution together with its statistics."""

    results: list[TermSearchResult[T]] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def items(self) -> list[T]:
        return [result.item for result in self.results]
