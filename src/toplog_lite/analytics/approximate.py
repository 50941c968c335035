"""Streaming top-K with two Count-Min Sketches.

One sketch counts requests, a second with identical (depth, width,
seed) accumulates bytes. Sharing the hash layout means a key's size
estimate is inflated by the same set of colliding keys as the count
estimate that ranked it.

Per event:
    1. count_sketch.add(key, 1)
    2. size_sketch.add(key, amount)
    3. top_k.upsert(key, count_sketch.estimate(key))

At the end each surviving candidate's byte total is re-queried from the
size sketch rather than taken from any value seen mid-stream, so the
reported sizes reflect the final sketch state.

Memory is two sketches plus k candidates, independent of stream length
and key cardinality.
"""
from __future__ import annotations

import logging
from typing import Iterable

from toplog_lite.analytics.countmin import CountMinSketch
from toplog_lite.analytics.topk import BoundedTopK
from toplog_lite.domain.config import ConfigurationError, CountConfig, check_top_k
from toplog_lite.domain.events import Event
from toplog_lite.domain.results import Candidate, Result

log = logging.getLogger(__name__)


class ApproximateCounter:
    """Owns a count sketch, a size sketch and a bounded top-K set for one run.

    Args:
        k: number of results to keep
        count_sketch: sketch incremented by 1 per event
        size_sketch: sketch incremented by each event's byte amount; must
            share depth, width and seed with count_sketch
    """

    def __init__(
        self,
        k: int,
        count_sketch: CountMinSketch,
        size_sketch: CountMinSketch,
    ) -> None:
        check_top_k(k)
        if count_sketch is size_sketch:
            raise ConfigurationError("count and size sketches must be distinct instances")
        if not count_sketch.compatible_with(size_sketch):
            raise ConfigurationError(
                "count and size sketches must share depth, width and seed"
            )
        self._count_sketch = count_sketch
        self._size_sketch = size_sketch
        self._top_k = BoundedTopK(k)
        self._events_processed = 0

    @classmethod
    def create(cls, k: int, depth: int, width: int, seed: int = 0) -> ApproximateCounter:
        return cls(
            k,
            CountMinSketch(depth, width, seed),
            CountMinSketch(depth, width, seed),
        )

    @classmethod
    def from_config(cls, config: CountConfig) -> ApproximateCounter:
        return cls.create(config.k, config.depth, config.width, config.seed)

    @property
    def k(self) -> int:
        return self._top_k.k

    @property
    def events_processed(self) -> int:
        return self._events_processed

    @property
    def count_sketch(self) -> CountMinSketch:
        return self._count_sketch

    @property
    def size_sketch(self) -> CountMinSketch:
        return self._size_sketch

    @property
    def top_k(self) -> BoundedTopK:
        return self._top_k

    def add(self, event: Event) -> None:
        key = event.key
        self._count_sketch.add(key, 1)
        self._size_sketch.add(key, event.amount)
        self._top_k.upsert(key, self._count_sketch.estimate(key))
        self._events_processed += 1

    def merge(self, other: ApproximateCounter) -> None:
        """Fold another shard's counter into this one.

        Sketches merge by element-wise addition. Per-shard candidate
        estimates are stale once the sketches are combined, so every
        candidate from either shard is re-queried against the merged
        count sketch and re-ranked.
        """
        if other is self:
            raise ConfigurationError("cannot merge a counter into itself")
        if not self._count_sketch.compatible_with(other._count_sketch):
            raise ConfigurationError("cannot merge counters with different sketch parameters")
        if self.k != other.k:
            raise ConfigurationError(f"cannot merge counters with k={self.k} and k={other.k}")

        keys = set(self._top_k.keys()) | set(other._top_k.keys())
        self._count_sketch.merge(other._count_sketch)
        self._size_sketch.merge(other._size_sketch)

        merged = BoundedTopK(self.k)
        for key in sorted(keys):
            merged.offer(Candidate(key, self._count_sketch.estimate(key)))
        self._top_k = merged
        self._events_processed += other._events_processed

    def memory_bytes(self) -> int:
        """Nominal footprint of both sketches."""
        return self._count_sketch.memory_bytes() + self._size_sketch.memory_bytes()

    def results(self) -> list[Result]:
        candidates = self._top_k.snapshot()
        log.debug(
            "sketch run: %d events, %d candidates, %d sketch bytes",
            self._events_processed, len(candidates), self.memory_bytes(),
        )
        return [
            Result(key=c.key, size=self._size_sketch.estimate(c.key))
            for c in candidates
        ]


def approximate_top_k(
    events: Iterable[Event],
    k: int,
    depth: int,
    width: int,
    seed: int = 0,
) -> list[Result]:
    """Top-k keys by estimated request count, with estimated byte totals."""
    counter = ApproximateCounter.create(k, depth, width, seed)
    for event in events:
        counter.add(event)
    return counter.results()
