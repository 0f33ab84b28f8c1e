"""Top-K and Bottom-K selection policies.

Both are a SelectEngine with a fixed ordering:
    - Top: lower score is worse (``operator.lt``), keeps the K highest
    - Bottom: higher score is worse (``operator.gt``), keeps the K lowest

Usage:
    top = Top(3, lambda v: v)
    for v in values:
        top.offer(v)
    best = top.results(sorted=True)

    # or one-shot
    best = Top.compute(3, values, lambda v: v)
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Generic, TypeVar

from selectk.core import Direction, SelectionState
from selectk.engine import ScoredCandidate, SelectEngine, SelectionStats

T = TypeVar("T")
S = TypeVar("S")


class _Policy(Generic[T, S]):
    """Shared surface of Top and Bottom; subclasses pin the direction."""

    direction: ClassVar[Direction]
    is_worse: ClassVar[Callable[[Any, Any], bool]]

    def __init__(self, k: int, scorer: Callable[[T], S]) -> None:
        self._select: SelectEngine[T, S] = SelectEngine(k, scorer, type(self).is_worse)

    @property
    def k(self) -> int:
        return self._select.k

    @property
    def state(self) -> SelectionState:
        return self._select.state

    @property
    def stats(self) -> SelectionStats:
        return self._select.stats

    def __len__(self) -> int:
        return len(self._select)

    def __bool__(self) -> bool:
        return bool(self._select)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(k={self.k}, size={len(self)})"

    def offer(self, candidate: T) -> bool:
        return self._select.offer(candidate)

    def offer_all(self, candidates: Iterable[T]) -> int:
        return self._select.offer_all(candidates)

    def worst(self) -> ScoredCandidate[T, S] | None:
        return self._select.worst()

    def results(
        self,
        sorted: bool = True,  # noqa: A002
        preserve_selection: bool = False,
    ) -> list[T]:
        """Retained candidates, best first when sorted.

        With the default ``preserve_selection=False`` this drains the policy.
        """
        return self._select.results(sorted, preserve_selection)

    def scored_results(
        self,
        sorted: bool = True,  # noqa: A002
        preserve_selection: bool = False,
    ) -> list[ScoredCandidate[T, S]]:
        return self._select.scored_results(sorted, preserve_selection)

    @classmethod
    def compute(cls, k: int, inputs: Iterable[T], scorer: Callable[[T], S]) -> list[T]:
        """Select from a finite sequence in one call.

        Equivalent to offering every element of ``inputs`` in order to a
        fresh instance and calling ``results(sorted=True,
        preserve_selection=False)``.
        """
        selector = cls(k, scorer)
        selector.offer_all(inputs)
        return selector.results(sorted=True, preserve_selection=False)


class Top(_Policy[T, S]):
    """Retains the K candidates with the greatest scores."""

    direction = Direction.TOP
    is_worse = staticmethod(operator.lt)


class Bottom(_Policy[T, S]):
    """Retains the K candidates with the least scores."""

    direction = Direction.BOTTOM
    is_worse = staticmethod(operator.gt)


_POLICIES: dict[Direction, type[_Policy[Any, Any]]] = {
    Direction.TOP: Top,
    Direction.BOTTOM: Bottom,
}


def selector_for(direction: Direction, k: int, scorer: Callable[[T], S]) -> _Policy[T, S]:
    """Build the policy matching ``direction``."""
    return _POLICIES[direction](k, scorer)


def compute(
    k: int,
    inputs: Iterable[T],
    scorer: Callable[[T], S],
    direction: Direction = Direction.TOP,
) -> list[T]:
    """One-shot selection, best first. See _Policy.compute."""
    return _POLICIES[direction].compute(k, inputs, scorer)
