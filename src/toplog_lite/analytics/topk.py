"""Bounded top-K candidate set.

Keeps at most k candidates, unique by key, ordered by descending
estimate with ties broken by ascending key. The total order does not
depend on insertion order or dict iteration order, so identical input
always yields an identical snapshot.

Layout:
    _index:  dict key -> current estimate      (membership, O(1))
    _order:  list[(-estimate, key)], sorted    (ranking, bisect)

Updating a key removes its stale entry before inserting the new one,
which is what keeps the set free of duplicates as a key's estimate
grows. When the set overflows, the last entry in ranking order is
evicted: the smallest estimate, and among equal smallest estimates the
lexically greatest key. The set therefore always holds the first k
candidates of the total order over everything it has seen survive.

k is expected to be small, so list insertion/removal (O(k) memmove
after an O(log k) bisect) is cheaper in practice than a tree.
"""
from __future__ import annotations

import bisect

from toplog_lite.domain.config import check_top_k
from toplog_lite.domain.results import Candidate
from toplog_lite.domain.types import ResourceKey


class BoundedTopK:
    """Capacity-limited ordered candidate set."""

    __slots__ = ("_k", "_index", "_order")

    def __init__(self, k: int) -> None:
        self._k = check_top_k(k)
        self._index: dict[ResourceKey, int] = {}
        self._order: list[tuple[int, ResourceKey]] = []

    @property
    def k(self) -> int:
        return self._k

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def estimate_of(self, key: ResourceKey) -> int | None:
        """Stored estimate for key, or None if it is not a candidate."""
        return self._index.get(key)

    @property
    def min_estimate(self) -> int | None:
        """Smallest stored estimate, None when empty."""
        if not self._order:
            return None
        return -self._order[-1][0]

    def upsert(self, key: ResourceKey, estimate: int) -> None:
        """Insert or replace the candidate for key, then evict down to k."""
        old = self._index.pop(key, None)
        if old is not None:
            i = bisect.bisect_left(self._order, (-old, key))
            del self._order[i]

        entry = (-estimate, key)
        bisect.insort(self._order, entry)
        self._index[key] = estimate

        if len(self._order) > self._k:
            _, evicted = self._order.pop()
            del self._index[evicted]

    def offer(self, candidate: Candidate) -> None:
        self.upsert(candidate.key, candidate.estimate)

    def snapshot(self) -> list[Candidate]:
        """Current candidates, best first. Does not mutate the set."""
        return [Candidate(key=key, estimate=-neg) for neg, key in self._order]

    def keys(self) -> list[ResourceKey]:
        return [key for _, key in self._order]
