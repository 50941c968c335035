"""Exact per-key counting: the ground truth for the sketch strategy.

Memory grows with the number of distinct keys, so this is only viable
when that cardinality fits in memory. Ordering matches the sketch
strategy (count descending, key ascending) so the two are comparable
row for row.
"""
from __future__ import annotations

import heapq
import logging
from typing import Iterable

from toplog_lite.domain.config import check_top_k
from toplog_lite.domain.events import Event
from toplog_lite.domain.results import CountStats, Result
from toplog_lite.domain.types import ResourceKey

log = logging.getLogger(__name__)


class ExactCounter:
    """Accumulates exact request count and byte total per key."""

    def __init__(self, k: int) -> None:
        self._k = check_top_k(k)
        self._counts: dict[ResourceKey, CountStats] = {}
        self._events_processed = 0

    @property
    def k(self) -> int:
        return self._k

    @property
    def events_processed(self) -> int:
        return self._events_processed

    @property
    def distinct_keys(self) -> int:
        return len(self._counts)

    def add(self, event: Event) -> None:
        stats = self._counts.get(event.key)
        if stats is None:
            stats = self._counts[event.key] = CountStats()
        stats.count += 1
        stats.size += event.amount
        self._events_processed += 1

    def stats(self, key: ResourceKey) -> CountStats:
        """Exact statistics for key; zeroes if it was never seen."""
        found = self._counts.get(key)
        if found is None:
            return CountStats()
        return CountStats(found.count, found.size)

    def results(self) -> list[Result]:
        top = heapq.nsmallest(
            self._k,
            self._counts.items(),
            key=lambda item: (-item[1].count, item[0]),
        )
        log.debug(
            "exact run: %d events, %d distinct keys, %d results",
            self._events_processed, len(self._counts), len(top),
        )
        return [Result(key=key, size=stats.size) for key, stats in top]


def exact_top_k(events: Iterable[Event], k: int) -> list[Result]:
    """Top-k keys by exact request count, with exact byte totals."""
    counter = ExactCounter(k)
    for event in events:
        counter.add(event)
    return counter.results()
