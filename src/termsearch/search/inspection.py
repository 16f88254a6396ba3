"""
Diagnostic helpers for explaining how a token relates to a search term.

These are not used while scoring; they exist for debugging rankings, e.g.
"why did this item rank below that one".

Example:
    >>> from termsearch.core.types import Token
    >>> check = check_token("mac", Token("Macdonald"))
    >>> check.result
    <TokenCheckResult.STARTS_WITH: 'startsWith'>
    >>> check > TokenCheckResult.CONTAINS
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.types import Token
from ..utils.error_handling import AmbiguousComparisonError


class TokenCheckResult(Enum):
    """Relation of a token to a term, strongest first."""

    EQUALS = "equals"
    STARTS_WITH = "startsWith"
    CONTAINS = "contains"
    NONE = "none"

    @property
    def strength(self) -> int:
        return _STRENGTH[self]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TokenCheckResult):
            return NotImplemented
        return self.strength > other.strength

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TokenCheckResult):
            return NotImplemented
        return self.strength < other.strength


_STRENGTH = {
    TokenCheckResult.EQUALS: 3,
    TokenCheckResult.STARTS_WITH: 2,
    TokenCheckResult.CONTAINS: 1,
    TokenCheckResult.NONE: 0,
}


@dataclass(frozen=True, slots=True)
class TokenCheck:
    """A term/token pair, optionally with the outcome of checking it."""

    term: str
    token: Token
    result: TokenCheckResult | None = None

    @classmethod
    def check(cls, term: str, token: Token) -> TokenCheck:
        return cls(term, token)

    def with_result(self, result: TokenCheckResult) -> TokenCheck:
        return TokenCheck(self.term, self.token, result)

    def __gt__(self, other: Any) -> bool:
        """Whether this check is a stronger match than ``other``.

        ``other`` may be a checked TokenCheck, a TokenCheckResult or None.
        Anything else, including a TokenCheck without a result, raises
        AmbiguousComparisonError. An unchecked ``self`` counts as NONE.
        """
        if other is None:
            return True
        if isinstance(other, TokenCheck):
            other_result = other.result
        elif isinstance(other, TokenCheckResult):
            other_result = other
        else:
            other_result = None
        if other_result is None:
            raise AmbiguousComparisonError(other)
        return (self.result or TokenCheckResult.NONE) > other_result


def check_token(term: str, token: Token) -> TokenCheck:
    """Classify the strongest relation between an already-normalized term and a token."""
    if token.equals(term):
        result = TokenCheckResult.EQUALS
    elif token.starts_with(term):
        result = TokenCheckResult.STARTS_WITH
    elif len(term) > 1 and token.contains(term):
        result = TokenCheckResult.CONTAINS
    else:
        result = TokenCheckResult.NONE
    return TokenCheck(term, token, result)
