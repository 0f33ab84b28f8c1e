"""Bounded-heap selection engine.

Keeps the K best-scoring candidates seen so far in a binary heap whose root
is the *worst* retained entry, so each offer costs O(log K) and memory stays
O(K) regardless of how many candidates are offered.

"Worse" is defined by a strict-weak-order predicate ``is_worse(a, b)`` over
scores. Top-K uses ``operator.lt`` (lower is worse), Bottom-K uses
``operator.gt`` (higher is worse). Nothing else differs between the two.

Tie policy:
    - An offer whose score equals the current worst never evicts it
      (first offered wins at the boundary).
    - Among retained entries with equal scores, the later-offered one is
      considered worse: it is evicted first and emitted last when sorted.

The engine is not thread-safe. Callers feeding it from several threads must
serialise ``offer`` and ``results`` themselves.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from selectk.core import SelectionState
from selectk.errors import validate_k

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")


@dataclass(frozen=True)
class ScoredCandidate(Generic[T, S]):
    """A candidate paired with its score.

    Attributes:
        candidate: The caller's value, stored as given
        score: Result of the scoring function for this candidate
        seq: 0-based offer sequence number within the engine
    """

    candidate: T
    score: S
    seq: int


@dataclass(frozen=True)
class SelectionStats:
    """Counters describing engine activity since construction or last drain.

    Attributes:
        offered: Calls to offer() that completed (scorer did not raise)
        accepted: Offers that ended up retained at the time of the offer
        rejected: Offers discarded without changing the retained set
        evicted: Retained entries displaced by a strictly better offer
    """

    offered: int = 0
    accepted: int = 0
    rejected: int = 0
    evicted: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "offered": self.offered,
            "accepted": self.accepted,
            "rejected": self.rejected,
            "evicted": self.evicted,
        }


class _HeapEntry(Generic[T, S]):
    """Heap node ordered so that the worst entry compares smallest."""

    __slots__ = ("is_worse", "item")

    def __init__(self, item: ScoredCandidate[T, S], is_worse: Callable[[S, S], bool]) -> None:
        self.item = item
        self.is_worse = is_worse

    def __lt__(self, other: _HeapEntry[T, S]) -> bool:
        a = self.item
        b = other.item
        if self.is_worse(a.score, b.score):
            return True
        if self.is_worse(b.score, a.score):
            return False
        # Equal scores: later offer is worse
        return a.seq > b.seq


class SelectEngine(Generic[T, S]):
    """Generic bounded selection over a stream of candidates.

    Args:
        k: Maximum number of candidates retained (>= 0, fixed for life)
        scorer: Maps a candidate to its score; called once per offer
        is_worse: ``is_worse(a, b)`` is True when score ``a`` ranks strictly
            below score ``b``

    Raises:
        InvalidBoundError: If k is negative or not an integer
    """

    def __init__(
        self,
        k: int,
        scorer: Callable[[T], S],
        is_worse: Callable[[S, S], bool],
    ) -> None:
        self._k = validate_k(k)
        self._scorer = scorer
        self._is_worse = is_worse
        self._heap: list[_HeapEntry[T, S]] = []
        self._seq = 0
        self._reset_counters()
        logger.debug("SelectEngine created: k=%d is_worse=%r", self._k, is_worse)

    # -- Introspection ------------------------------------------------------

    @property
    def k(self) -> int:
        return self._k

    @property
    def state(self) -> SelectionState:
        """ACCUMULATING while fewer than k are retained, SATURATED at k."""
        if len(self._heap) < self._k:
            return SelectionState.ACCUMULATING
        return SelectionState.SATURATED

    @property
    def stats(self) -> SelectionStats:
        """Snapshot of the activity counters."""
        return SelectionStats(
            offered=self._offered,
            accepted=self._accepted,
            rejected=self._rejected,
            evicted=self._evicted,
        )

    def _reset_counters(self) -> None:
        self._offered = 0
        self._accepted = 0
        self._rejected = 0
        self._evicted = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(k={self._k}, size={len(self._heap)})"

    def worst(self) -> ScoredCandidate[T, S] | None:
        """Return the entry that the next accepted offer would evict.

        Returns None when nothing is retained. Does not mutate the engine.
        """
        if not self._heap:
            return None
        return self._heap[0].item

    # -- Mutation -----------------------------------------------------------

    def offer(self, candidate: T) -> bool:
        """Consider one candidate for retention.

        Returns:
            True if the candidate was retained, False if discarded.

        Exceptions raised by the scorer propagate; nothing is committed
        before scoring succeeds.
        """
        if self._k == 0:
            return False

        score = self._scorer(candidate)
        entry = _HeapEntry(ScoredCandidate(candidate, score, self._seq), self._is_worse)
        self._seq += 1
        self._offered += 1

        if len(self._heap) < self._k:
            heapq.heappush(self._heap, entry)
            self._accepted += 1
            return True

        # Strictly better than the worst retained; ties keep the incumbent
        if self._is_worse(self._heap[0].item.score, score):
            heapq.heapreplace(self._heap, entry)
            self._accepted += 1
            self._evicted += 1
            return True

        self._rejected += 1
        return False

    def offer_all(self, candidates: Iterable[T]) -> int:
        """Offer each candidate in iteration order.

        Returns:
            Number of offers that were accepted
        """
        accepted = 0
        for candidate in candidates:
            if self.offer(candidate):
                accepted += 1
        return accepted

    # -- Extraction ---------------------------------------------------------

    def scored_results(
        self,
        sorted: bool = True,  # noqa: A002 - mirrors results() keyword
        preserve_selection: bool = False,
    ) -> list[ScoredCandidate[T, S]]:
        """Extract retained entries together with their scores.

        Args:
            sorted: If True, best first; otherwise heap-extraction order
                (worst first, only the multiset is meaningful)
            preserve_selection: If True, work on a copy and leave the engine
                untouched. If False, this is a destructive read: the engine
                is drained and reset to a freshly constructed state.
        """
        if preserve_selection:
            heap = list(self._heap)
        else:
            heap = self._heap
            logger.debug("Draining SelectEngine: k=%d size=%d", self._k, len(heap))
            self._heap = []
            self._seq = 0
            self._reset_counters()

        if sorted:
            return _extract_sorted(heap)
        return _extract(heap)

    def results(
        self,
        sorted: bool = True,  # noqa: A002 - public keyword name
        preserve_selection: bool = False,
    ) -> list[T]:
        """Extract retained candidates.

        The number of candidates returned is ``min(k, accepted offers)``.
        See scored_results() for argument semantics; with
        ``preserve_selection=False`` the engine is emptied.
        """
        return [s.candidate for s in self.scored_results(sorted, preserve_selection)]


def _extract(heap: list[_HeapEntry[T, S]]) -> list[ScoredCandidate[T, S]]:
    """Pop every entry, worst first. Empties ``heap``."""
    out: list[ScoredCandidate[T, S]] = []
    while heap:
        out.append(heapq.heappop(heap).item)
    return out


def _extract_sorted(heap: list[_HeapEntry[T, S]]) -> list[ScoredCandidate[T, S]]:
    """Pop worst first into a buffer, then emit it reversed (best first)."""
    buffer = _extract(heap)
    buffer.reverse()
    return buffer
