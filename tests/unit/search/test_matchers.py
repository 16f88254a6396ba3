"""Tests for termsearch.search.matchers module."""

from __future__ import annotations

import pytest

from termsearch.core.types import TermMatch, Token
from termsearch.search.matchers import (
    DEFAULT_MATCHER_PRIORITY,
    ContainsMatch,
    EqualsMatch,
    StartsWithMatch,
    TermMatcher,
    default_matchers,
    first_match,
    sort_matchers,
)


class _Always(TermMatcher):
    def __init__(self, key: str, priority: int = DEFAULT_MATCHER_PRIORITY):
        self.key = key
        self.priority = priority

    def apply(self, term, token):
        return [TermMatch.of(self.key, term, token)]


@pytest.mark.matcher
class TestBuiltinMatchers:
    """Tests for the three built-in matchers."""

    def test_priorities(self):
        assert EqualsMatch.priority == 800
        assert StartsWithMatch.priority == 900
        assert ContainsMatch.priority == 1100

    def test_keys(self):
        assert [m.key for m in default_matchers()] == ["equals", "startsWith", "contains"]

    def test_equals(self):
        token = Token("Mac")
        assert EqualsMatch().apply("mac", token) == [TermMatch.equals("mac", token)]
        assert EqualsMatch().apply("ma", token) == []

    def test_starts_with(self):
        token = Token("Macdonald")
        assert StartsWithMatch().apply("mac", token) == [TermMatch.starts_with("mac", token)]
        assert StartsWithMatch().apply("don", token) == []

    def test_contains(self):
        token = Token("Big Mac")
        assert ContainsMatch().apply("mac", token) == [TermMatch.contains("mac", token)]
        assert ContainsMatch().apply("xyz", token) == []

    def test_contains_ignores_single_character_terms(self):
        assert ContainsMatch().apply("m", Token("Big Mac")) == []

    def test_repr(self):
        assert repr(EqualsMatch()) == "EqualsMatch(key='equals', priority=800)"


@pytest.mark.matcher
class TestOrdering:
    def test_sort_by_priority(self):
        matchers = sort_matchers([ContainsMatch(), EqualsMatch(), StartsWithMatch()])
        assert [m.key for m in matchers] == ["equals", "startsWith", "contains"]

    def test_equal_priorities_keep_order(self):
        matchers = sort_matchers([_Always("b"), _Always("a"), _Always("first", priority=1)])
        assert [m.key for m in matchers] == ["first", "b", "a"]


@pytest.mark.matcher
class TestFirstMatch:
    """The first matcher with a non-empty result wins."""

    def test_equal_token_only_reports_equals(self):
        token = Token("Mac")
        matches = first_match(sort_matchers(default_matchers()), "mac", token)
        assert matches == [TermMatch.equals("mac", token)]

    def test_falls_through_to_contains(self):
        token = Token("Big Mac")
        matches = first_match(sort_matchers(default_matchers()), "mac", token)
        assert [m.key for m in matches] == ["contains"]

    def test_no_match(self):
        assert first_match(sort_matchers(default_matchers()), "zz", Token("Mac")) == []

    def test_no_matchers(self):
        assert first_match([], "mac", Token("Mac")) == []

    def test_custom_matcher_shortcircuits(self):
        matchers = sort_matchers([*default_matchers(), _Always("custom", priority=850)])
        matches = first_match(matchers, "mac", Token("Macdonald"))
        assert [m.key for m in matches] == ["custom"]
