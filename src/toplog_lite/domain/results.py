"""Value types produced by the counters.

Candidate identity is the key alone. Two candidates with the same key
are the same top-K slot no matter what their estimates are; the
estimate is excluded from equality and hashing explicitly rather than
through an operator override.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from toplog_lite.domain.types import ByteCount, ResourceKey


@dataclass(frozen=True, slots=True)
class Candidate:
    """A key tracked by the bounded top-K set with its current estimate."""
    key: ResourceKey
    estimate: int = field(compare=False)


@dataclass(frozen=True, slots=True)
class Result:
    """Externally visible output row: resource and its (estimated) byte total."""
    key: ResourceKey
    size: ByteCount


@dataclass(slots=True)
class CountStats:
    """Exact per-key accumulator."""
    count: int = 0
    size: ByteCount = 0
