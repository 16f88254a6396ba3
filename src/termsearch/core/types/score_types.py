"""
Score accumulation types.

A ``Score`` collects ``Boost`` contributions from every configured scorer and
resolves them into a single float exactly once. Amount boosts are summed;
percent boosts are averaged and the average multiplies the summed amount.

Example:
    >>> score = Score.zero()
    >>> score += Boost.of_amount(2.0, "terms")
    >>> score += Boost.of_percent(1.5, "firstName")
    >>> score.calculate()
    3.0
    >>> score += Boost.of_amount(1.0)
    Traceback (most recent call last):
    ...
    termsearch.utils.error_handling.FrozenScoreError: Score is frozen - new values cannot be added
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from ...utils.error_handling import FrozenScoreError

DebugLabel = str | Callable[[], str] | None


@dataclass(frozen=True, slots=True)
class Boost:
    """
    A single scoring contribution: an additive amount, a percent, or both.

    The debug label only shows up in ``str()`` output. It may be a callable so
    that building the label costs nothing unless somebody prints the score.
    """

    amount: float | None = None
    percent: float | None = None
    debug_label: DebugLabel = field(default=None, compare=False)

    @classmethod
    def of_amount(cls, amount: float, debug_label: DebugLabel = None) -> Boost:
        return cls(amount=amount, debug_label=debug_label)

    @classmethod
    def of_percent(cls, percent: float, debug_label: DebugLabel = None) -> Boost:
        return cls(percent=percent, debug_label=debug_label)

    def times(self, factor: float, debug_label: DebugLabel = None) -> Boost:
        """Scale whichever of amount and percent is present."""
        return Boost(
            None if self.amount is None else self.amount * factor,
            None if self.percent is None else self.percent * factor,
            debug_label,
        )

    def __mul__(self, factor: float) -> Boost:
        return self.times(factor, self.debug_label)

    @property
    def label(self) -> str | None:
        if callable(self.debug_label):
            return self.debug_label()
        return self.debug_label

    def __str__(self) -> str:
        label = self.label
        parts = []
        if label is not None:
            parts.append(f"{label}[")
        if self.amount is not None:
            parts.append(f"+{self.amount}")
        if self.percent is not None:
            parts.append(f"+{self.percent}%")
        if label is not None:
            parts.append("]; ")
        return "".join(parts)


def calculate_score(boosts: Iterable[Boost]) -> float:
    """Sum the amounts, then multiply by the mean percent if any percent is present."""
    amount = 0.0
    percent = 0.0
    pct_count = 0
    for boost in boosts:
        if boost.amount is not None:
            amount += boost.amount
        if boost.percent is not None:
            percent += boost.percent
            pct_count += 1
    return amount * (percent / pct_count) if pct_count > 0 else amount


class ScoreState(str, Enum):
    OPEN = "open"
    FROZEN = "frozen"


class Score:
    """
    Append-only accumulator of boosts for one search result.

    The score is ``OPEN`` until ``calculate()`` is called, which caches the
    value and moves it to ``FROZEN``. Appending to a frozen score raises
    ``FrozenScoreError``.
    """

    __slots__ = ("_boosts", "_state", "_value")

    def __init__(self) -> None:
        self._boosts: list[Boost] = []
        self._state = ScoreState.OPEN
        self._value = 0.0

    @classmethod
    def zero(cls) -> Score:
        return cls()

    @property
    def boosts(self) -> tuple[Boost, ...]:
        return tuple(self._boosts)

    @property
    def state(self) -> ScoreState:
        return self._state

    @property
    def is_frozen(self) -> bool:
        return self._state is ScoreState.FROZEN

    def add(self, boost: Boost) -> Score:
        if self._state is ScoreState.FROZEN:
            raise FrozenScoreError(
                "Score is frozen - new values cannot be added",
                context={"value": self._value, "boost": str(boost)},
            )
        self._boosts.append(boost)
        return self

    def __iadd__(self, boost: Boost) -> Score:
        return self.add(boost)

    def calculate(self) -> float:
        if self._state is ScoreState.OPEN:
            self._value = calculate_score(self._boosts)
            self._state = ScoreState.FROZEN
        return self._value

    def __str__(self) -> str:
        value = self._value if self.is_frozen else None
        return f"{value}: boosts: {''.join(str(b) for b in self._boosts)}"

    def __repr__(self) -> str:
        return f"Score(state={self._state.value}, boosts={len(self._boosts)})"
