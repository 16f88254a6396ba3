"""
Result filtering, ordering and limiting.

Ranking is a stable sort on descending score, so results with equal scores
keep the order in which the item source produced them.
"""

from __future__ import annotations

import bisect
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from typing import TypeVar

from ..core.types import TermSearchResult

T = TypeVar("T")


def where_matched_all(results: Iterable[TermSearchResult[T]]) -> list[TermSearchResult[T]]:
    """Keep only results that matched every query term."""
    return [result for result in results if result.match_all]


def sorted_by_score(results: Iterable[TermSearchResult[T]]) -> list[TermSearchResult[T]]:
    """Order results best-first; ties keep their incoming order."""
    return sorted(results, key=lambda result: result.score_value, reverse=True)


def limit_results(
    results: list[TermSearchResult[T]], limit: int | None
) -> list[TermSearchResult[T]]:
    if limit is None:
        return list(results)
    return results[:limit]


def rank_results(
    results: Iterable[TermSearchResult[T]], match_all: bool = False, limit: int | None = None
) -> list[TermSearchResult[T]]:
    """Filter, sort and truncate a materialized result set."""
    filtered = where_matched_all(results) if match_all else list(results)
    return limit_results(sorted_by_score(filtered), limit)


async def top_scores(
    results: AsyncIterable[TermSearchResult[T]], count: int = 10
) -> AsyncIterator[list[TermSearchResult[T]]]:
    """
    Track the best ``count`` results of a result stream.

    A new snapshot of the current top results is emitted only when an incoming
    result changes it. A late result that ties with the last entry does not
    displace it.
    """
    if count <= 0:
        return
    top: list[TermSearchResult[T]] = []
    keys: list[float] = []
    async for result in results:
        key = -result.score_value
        position = bisect.bisect_right(keys, key)
        if position >= count:
            continue
        keys.insert(position, key)
        top.insert(position, result)
        if len(top) > count:
            keys.pop()
            top.pop()
        yield list(top)
