"""
Term matchers.

A matcher examines one search term and one token and decides whether the token
satisfies the term. Each kind of match (exact, prefix, substring) is its own
``TermMatcher`` so that callers can add or remove kinds per search; for
example, leaving out ``ContainsMatch`` restricts a search to exact and prefix
matches.

Matchers run in ascending priority order and the first matcher that returns a
non-empty result wins for that (term, token) pair. A token that equals the
term therefore produces only the ``equals`` match, never an additional
``contains`` match.

Example:
    >>> from termsearch.core.types import Token
    >>> matchers = sort_matchers(default_matchers())
    >>> first_match(matchers, "john", Token("Johnson"))
    [TermMatch(key='startsWith', term='john', token=Token(value='johnson', name='Johnson'))]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from ..core.types import MatchKind, TermMatch, Token

DEFAULT_MATCHER_PRIORITY = 1000


class TermMatcher(ABC):
    """Strategy deciding whether a token satisfies a search term."""

    key: str = ""
    priority: int = DEFAULT_MATCHER_PRIORITY

    @abstractmethod
    def apply(self, term: str, token: Token) -> list[TermMatch]:
        """Return the matches of ``term`` against ``token``; empty means no match.

        ``term`` is already normalized the same way the token value is.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, priority={self.priority})"


class EqualsMatch(TermMatcher):
    key = MatchKind.EQUALS.value
    priority = DEFAULT_MATCHER_PRIORITY - 200

    def apply(self, term: str, token: Token) -> list[TermMatch]:
        return [TermMatch.equals(term, token)] if token.equals(term) else []


class StartsWithMatch(TermMatcher):
    key = MatchKind.STARTS_WITH.value
    priority = DEFAULT_MATCHER_PRIORITY - 100

    def apply(self, term: str, token: Token) -> list[TermMatch]:
        return [TermMatch.starts_with(term, token)] if token.starts_with(term) else []


class ContainsMatch(TermMatcher):
    """Substring match; single-character terms are ignored."""

    key = MatchKind.CONTAINS.value
    priority = DEFAULT_MATCHER_PRIORITY + 100

    def apply(self, term: str, token: Token) -> list[TermMatch]:
        if len(term) > 1 and token.contains(term):
            return [TermMatch.contains(term, token)]
        return []


def default_matchers() -> list[TermMatcher]:
    return [EqualsMatch(), StartsWithMatch(), ContainsMatch()]


def sort_matchers(matchers: Iterable[TermMatcher]) -> list[TermMatcher]:
    """Order matchers by ascending priority; equal priorities keep their order."""
    return sorted(matchers, key=lambda matcher: matcher.priority)


def first_match(matchers: Sequence[TermMatcher], term: str, token: Token) -> list[TermMatch]:
    """Run matchers in order and return the first non-empty result."""
    for matcher in matchers:
        matches = matcher.apply(term, token)
        if matches:
            return matches
    return []
