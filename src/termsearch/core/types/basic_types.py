"""
Basic type definitions for termsearch.

This module contains the value types compared during matching: tokens produced
from items, terms produced from the query, and the evidence records that link
the two.

Key Types:
    Token: A normalized, optionally named searchable unit derived from an item
    TokenList: A list of tokens with helpers for tokenizer implementations
    TokenizedItem: An input item paired with its distinct tokens
    MatchKind: Keys of the built-in matchers
    TermMatch: Evidence that one query term matched one token
    OutputFormat: Supported rendering formats
    SearchStats: Counters collected during one search execution

Example:
    Writing a tokenizer with named tokens:
        >>> from termsearch.core.types import TokenList
        >>>
        >>> def tokenize(person):
        ...     tokens = TokenList()
        ...     tokens.add_token(person.first_name, "firstName")
        ...     tokens.add_named("email", person.emails)
        ...     return tokens

    Splitting a query:
        >>> split_query_terms("Mary-Jane  Watson")
        frozenset({'mary', 'jane', 'watson'})
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Query terms are separated by whitespace, hyphens and periods.
SEARCH_TERM_DELIMITER = re.compile(r"[\s\-.]")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"
    HIGHLIGHT = "highlight"


class MatchKind(str, Enum):
    """Keys of the built-in term matchers."""

    EQUALS = "equals"
    STARTS_WITH = "startsWith"
    CONTAINS = "contains"


@dataclass(frozen=True, slots=True, init=False)
class Token:
    """
    A searchable unit produced by a tokenizer.

    The value is case-folded unless ``fold_case`` is False. The name records
    where the token came from (for example ``"firstName"``) and defaults to
    the raw value. Two tokens are equal when both value and name are equal.

    Example:
        >>> Token("John", "firstName")
        Token(value='john', name='firstName')
        >>> Token("John") == Token("john")
        False
    """

    value: str
    name: str

    def __init__(self, value: str, name: str | None = None, *, fold_case: bool = True) -> None:
        object.__setattr__(self, "value", value.lower() if fold_case else value)
        object.__setattr__(self, "name", value if name is None else name)

    def equals(self, term: str) -> bool:
        return self.value == term

    def starts_with(self, term: str) -> bool:
        return self.value.startswith(term)

    def contains(self, term: str) -> bool:
        return term in self.value

    def __str__(self) -> str:
        if self.name.lower() != self.value.lower():
            return f"{self.name}: {self.value}"
        return self.value


class TokenList(list[Token]):
    """List of tokens with helpers for building named tokens."""

    def add_token(self, value: str, name: str | None = None, *, fold_case: bool = True) -> None:
        self.append(Token(value, name, fold_case=fold_case))

    def add_named(
        self, name: str, values: Iterable[str | None], *, fold_case: bool = True
    ) -> None:
        """Add one token per non-empty value, all sharing ``name``."""
        for value in values:
            if value:
                self.append(Token(value, name, fold_case=fold_case))


def coerce_token(value: Any, fold_case: bool = True) -> Token | None:
    """Turn a tokenizer output value into a Token; ``None`` stays ``None``."""
    if value is None:
        return None
    if isinstance(value, Token):
        return value
    return Token(str(value), fold_case=fold_case)


def coerce_tokens(values: Iterable[Any] | None, fold_case: bool = True) -> frozenset[Token]:
    """Coerce and deduplicate tokenizer output, dropping ``None`` entries."""
    if not values:
        return frozenset()
    if isinstance(values, (str, Token)):
        values = [values]
    tokens = (coerce_token(value, fold_case) for value in values)
    return frozenset(token for token in tokens if token is not None)


def split_query_terms(query: str | None, fold_case: bool = True) -> frozenset[str]:
    """
    Split a raw query into its distinct search terms.

    Empty pieces are discarded, so a blank query yields an empty set.
    """
    if not query:
        return frozenset()
    pieces = SEARCH_TERM_DELIMITER.split(query)
    return frozenset(piece.lower() if fold_case else piece for piece in pieces if piece)


@dataclass(frozen=True, slots=True)
class TokenizedItem(Generic[T]):
    """An input item and the distinct tokens its tokenizer produced."""

    item: T
    tokens: frozenset[Token] = frozenset()


@dataclass(frozen=True, slots=True)
class TermMatch:
    """
    A positive match of one search term against one token.

    Attributes:
        key: Key of the matcher that produced the match, e.g. ``"equals"``
        term: The normalized search term that matched
        token: The token that matched
    """

    key: str
    term: str
    token: Token

    @classmethod
    def equals(cls, term: str, token: Token) -> TermMatch:
        return cls(MatchKind.EQUALS.value, term, token)

    @classmethod
    def starts_with(cls, term: str, token: Token) -> TermMatch:
        return cls(MatchKind.STARTS_WITH.value, term, token)

    @classmethod
    def contains(cls, term: str, token: Token) -> TermMatch:
        return cls(MatchKind.CONTAINS.value, term, token)

    @classmethod
    def of(cls, key: str, term: str, token: Token) -> TermMatch:
        return cls(key, term, token)

    def explain(self) -> str:
        return f"{self.key}:{self.term}->{self.token}"

    def __str__(self) -> str:
        return f"TermMatch({self.key}) {{term: {self.term}, matchedToken: {self.token}}}"


@dataclass(slots=True)
class SearchStats:
    """
    Counters collected during one search execution.

    Attributes:
        items_scanned: Items pulled from the source and tokenized
        items_matched: Items that produced at least one term match
        results: Results left after filtering and limiting
        elapsed_ms: Total execution time in milliseconds
        terms: Number of distinct query terms
    """

    items_scanned: int = 0
    items_matched: int = 0
    results: int = 0
    elapsed_ms: float = 0.0
    terms: int = 0
