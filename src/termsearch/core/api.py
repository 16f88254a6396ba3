"""
Main API module for termsearch.

This module provides the FullTextSearch class, which matches a free-text query
against a sequence of arbitrary items and returns the items ordered
best-match-first. Each item is reduced to tokens by a caller-supplied
tokenizer; every (token, term) pair is run through the priority-ordered
matchers, the matches of one item are aggregated into a TermSearchResult, and
the configured scorers turn that evidence into a score.

Classes:
    FullTextSearch: Orchestrates tokenizing, matching, scoring and ranking

Key Features:
    - Pluggable matchers (exact, prefix, substring, custom) with short-circuit
    - Pluggable scorers with additive and percent boosts
    - Match-all filtering and result limiting
    - Synchronous and asynchronous item sources
    - Streaming access to unsorted per-item results

Example:
    Basic search:
        >>> from termsearch import FullTextSearch
        >>>
        >>> people = [Person("John Bob Richards"), Person("Joe John Johnson")]
        >>> search = FullTextSearch("john", people, tokenize=lambda p: [p.name])
        >>> search.find_results()
        [Person('Joe John Johnson'), Person('John Bob Richards')]

    Replacing the built-in strategies:
        >>> from termsearch.search import EqualsMatch, MatchedTermsScoring
        >>> search = FullTextSearch.scoring(
        ...     "john", people, tokenize=lambda p: [p.name],
        ...     scorers=[MatchedTermsScoring()], matchers=[EqualsMatch()],
        ... )

    Asynchronous source:
        >>> results = await FullTextSearch("john", agen(), tokenize=...).aexecute()
"""

from __future__ import annotations

import time
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from ..search.matchers import TermMatcher, default_matchers, first_match, sort_matchers
from ..search.ranking import rank_results
from ..search.scorer import SearchScoring, default_scorers
from ..utils.error_handling import ConfigurationError, SourceTypeError
from ..utils.logging_config import SearchLogger, get_logger
from .config import SearchConfig
from .types import (
    MatchKind,
    SearchOutcome,
    SearchStats,
    TermMatch,
    TermSearchResult,
    TokenizedItem,
    coerce_tokens,
    split_query_terms,
)

T = TypeVar("T")

Tokenizer = Callable[[Any], Iterable[Any] | None]
ItemSource = Iterable[T] | AsyncIterable[T]


def _is_async_source(items: Any) -> bool:
    return hasattr(items, "__aiter__")


class FullTextSearch(Generic[T]):
    """
    Fuzzy term search over an in-memory item source.

    The query is split into a set of terms on whitespace, hyphens and periods.
    Every search re-scans the whole source; nothing is indexed or stored.

    Attributes:
        config (SearchConfig): Query and behavior switches
        items: Synchronous or asynchronous item source, read exactly once
        tokenize: Function reducing an item to token-like values
        matchers (tuple[TermMatcher, ...]): Matchers in ascending priority order
        scorers (tuple[SearchScoring, ...]): Scorers applied to every result
        terms (frozenset[str]): Distinct normalized query terms
        logger (SearchLogger): Logging interface
    """

    def __init__(
        self,
        query: str,
        items: ItemSource[T] | None,
        tokenize: Tokenizer,
        *,
        match_all: bool = False,
        starts_with: bool = True,
        ignore_case: bool = True,
        limit: int | None = None,
        additional_scorers: Sequence[SearchScoring] | None = None,
        additional_matchers: Sequence[TermMatcher] | None = None,
        logger: SearchLogger | None = None,
    ) -> None:
        """
        Create a search using the built-in matchers and scorers.

        Args:
            query: The search text; tokenized internally
            items: The items to search, either iterable or async iterable
            tokenize: Determines which searchable tokens an item produces
            match_all: Only return items that matched every query term,
                e.g. "Eric Martineau" must match both "Eric" AND "Martineau"
            starts_with: Include the prefix matcher
            ignore_case: Case-fold tokens and terms before matching
            limit: Maximum number of results to return
            additional_scorers: Scorers to run in addition to the defaults
            additional_matchers: Matchers to run in addition to the defaults
            logger: Custom logger instance. If None, uses default logger.
        """
        config = SearchConfig(
            query=query,
            match_all=match_all,
            starts_with=starts_with,
            ignore_case=ignore_case,
            limit=limit,
        )
        self._configure(
            config,
            items,
            tokenize,
            [*default_scorers(), *(additional_scorers or [])],
            [*default_matchers(), *(additional_matchers or [])],
            logger,
        )

    @classmethod
    def scoring(
        cls,
        query: str,
        items: ItemSource[T] | None,
        tokenize: Tokenizer,
        *,
        scorers: Sequence[SearchScoring] | None,
        matchers: Sequence[TermMatcher] | None = None,
        match_all: bool = False,
        starts_with: bool = True,
        ignore_case: bool = True,
        limit: int | None = None,
        logger: SearchLogger | None = None,
    ) -> FullTextSearch[T]:
        """Create a search whose scorers (and optionally matchers) replace the built-ins."""
        config = SearchConfig(
            query=query,
            match_all=match_all,
            starts_with=starts_with,
            ignore_case=ignore_case,
            limit=limit,
        )
        return cls.from_config(
            config, items, tokenize, scorers=scorers or [], matchers=matchers, logger=logger
        )

    @classmethod
    def from_config(
        cls,
        config: SearchConfig,
        items: ItemSource[T] | None,
        tokenize: Tokenizer,
        *,
        scorers: Sequence[SearchScoring] | None = None,
        matchers: Sequence[TermMatcher] | None = None,
        logger: SearchLogger | None = None,
    ) -> FullTextSearch[T]:
        """Create a search from a SearchConfig; None strategy lists mean the built-ins."""
        search: FullTextSearch[T] = cls.__new__(cls)
        search._configure(
            config,
            items,
            tokenize,
            default_scorers() if scorers is None else list(scorers),
            default_matchers() if matchers is None else list(matchers),
            logger,
        )
        return search

    def _configure(
        self,
        config: SearchConfig,
        items: ItemSource[T] | None,
        tokenize: Tokenizer,
        scorers: list[SearchScoring],
        matchers: list[TermMatcher],
        logger: SearchLogger | None,
    ) -> None:
        config.validate()
        if not callable(tokenize):
            raise ConfigurationError(
                "Tokenizer must be callable",
                context={"field": "tokenize", "value": repr(tokenize)},
            )
        if not scorers:
            raise ConfigurationError(
                "Must have at least one scorer",
                context={"field": "scorers", "value": 0},
            )

        self.config = config
        self.items: ItemSource[T] = () if items is None else items
        self.tokenize = tokenize
        self.scorers: tuple[SearchScoring, ...] = tuple(scorers)
        ordered = sort_matchers(matchers)
        if not config.starts_with:
            ordered = [m for m in ordered if m.key != MatchKind.STARTS_WITH.value]
        self.matchers: tuple[TermMatcher, ...] = tuple(ordered)
        self.terms: frozenset[str] = split_query_terms(config.query, config.ignore_case)
        self.logger = logger or get_logger()

        self.logger.log_strategies(
            matchers=[m.key for m in self.matchers],
            scorers=[s.key for s in self.scorers],
        )

    @property
    def query(self) -> str:
        return self.config.query

    @property
    def match_all(self) -> bool:
        return self.config.match_all

    @property
    def limit(self) -> int | None:
        return self.config.limit

    # ------------------------------------------------------------------
    # Per-item pipeline
    # ------------------------------------------------------------------

    def _tokenize_item(self, item: T) -> TokenizedItem[T]:
        return TokenizedItem(item, coerce_tokens(self.tokenize(item), self.config.ignore_case))

    def _match_tokens(self, tokenized: TokenizedItem[T]) -> list[TermMatch]:
        matches: list[TermMatch] = []
        for token in tokenized.tokens:
            for term in self.terms:
                matches.extend(first_match(self.matchers, term, token))
        return matches

    def _score_item(self, item: T, stats: SearchStats) -> TermSearchResult[T] | None:
        stats.items_scanned += 1
        tokenized = self._tokenize_item(item)
        result = TermSearchResult.from_matches(
            tokenized.item, self._match_tokens(tokenized), len(self.terms)
        )
        if result is None:
            return None

        stats.items_matched += 1
        for scorer in self.scorers:
            scorer.score_term(result, result.score)
        result.score.calculate()
        return result

    def _iter_results(self, stats: SearchStats) -> Iterator[TermSearchResult[T]]:
        if _is_async_source(self.items):
            raise SourceTypeError(
                "Item source is asynchronous; use the async entry points",
                context={"source_type": type(self.items).__name__},
            )
        if not self.terms:
            return
        for item in self.items:  # type: ignore[union-attr]
            result = self._score_item(item, stats)
            if result is not None:
                yield result

    async def _aiter_results(self, stats: SearchStats) -> AsyncIterator[TermSearchResult[T]]:
        if not self.terms:
            return
        if _is_async_source(self.items):
            async for item in self.items:  # type: ignore[union-attr]
                result = self._score_item(item, stats)
                if result is not None:
                    yield result
        else:
            for item in self.items:  # type: ignore[union-attr]
                result = self._score_item(item, stats)
                if result is not None:
                    yield result

    # ------------------------------------------------------------------
    # Synchronous entry points
    # ------------------------------------------------------------------

    def results(self) -> Iterator[TermSearchResult[T]]:
        """
        Stream per-item results, unsorted and unfiltered, in source order.

        Each yielded result is already scored and its score is frozen.

        Raises:
            SourceTypeError: If the item source is asynchronous.
        """
        return self._iter_results(SearchStats(terms=len(self.terms)))

    def execute_with_stats(self) -> SearchOutcome[T]:
        """Execute the search and return the ranked results with statistics."""
        stats = SearchStats(terms=len(self.terms))
        if not self.config.has_query:
            self.logger.debug("Blank query, skipping search", query=self.query)
            return SearchOutcome([], stats)

        self.logger.log_search_start(
            query=self.query, terms=self.terms, match_all=self.match_all, limit=self.limit
        )
        t0 = time.perf_counter()
        ranked = rank_results(self._iter_results(stats), self.match_all, self.limit)
        return self._finish(ranked, stats, t0)

    def execute(self) -> list[TermSearchResult[T]]:
        """
        Execute the search, applying match-all filtering, ranking and the limit.

        Returns:
            Results ordered by descending score; equal scores keep source order.
        """
        return self.execute_with_stats().results

    def find_results(self) -> list[T]:
        """Execute the search and return only the ranked items."""
        return [result.item for result in self.execute()]

    # ------------------------------------------------------------------
    # Asynchronous entry points
    # ------------------------------------------------------------------

    def aresults(self) -> AsyncIterator[TermSearchResult[T]]:
        """Async counterpart of results(); accepts sync or async sources."""
        return self._aiter_results(SearchStats(terms=len(self.terms)))

    async def aexecute_with_stats(self) -> SearchOutcome[T]:
        stats = SearchStats(terms=len(self.terms))
        if not self.config.has_query:
            self.logger.debug("Blank query, skipping search", query=self.query)
            return SearchOutcome([], stats)

        self.logger.log_search_start(
            query=self.query, terms=self.terms, match_all=self.match_all, limit=self.limit
        )
        t0 = time.perf_counter()
        collected = [result async for result in self._aiter_results(stats)]
        ranked = rank_results(collected, self.match_all, self.limit)
        return self._finish(ranked, stats, t0)

    async def aexecute(self) -> list[TermSearchResult[T]]:
        return (await self.aexecute_with_stats()).results

    async def afind_results(self) -> list[T]:
        return [result.item for result in await self.aexecute()]

    def _finish(
        self, ranked: list[TermSearchResult[T]], stats: SearchStats, t0: float
    ) -> SearchOutcome[T]:
        stats.results = len(ranked)
        stats.elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.logger.log_search_complete(
            query=self.query,
            results_count=stats.results,
            elapsed_ms=stats.elapsed_ms,
            items_scanned=stats.items_scanned,
            items_matched=stats.items_matched,
        )
        return SearchOutcome(ranked, stats)

    def __repr__(self) -> str:
        return (
            f"FullTextSearch(query={self.query!r}, match_all={self.match_all}, "
            f"limit={self.limit}, matchers={[m.key for m in self.matchers]})"
        )
