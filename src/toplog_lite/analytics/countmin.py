"""Count-Min Sketch used as a fixed-size frequency counter.

Answers "how much has key X accumulated so far?" for request counts or
byte totals. Memory is depth * width counters, fixed at construction,
regardless of how many events or distinct keys pass through it. It
never underestimates; it can overestimate when other keys collide with
X in every row.

Hash family: each row r gets its own 16-byte key, the first 16 bytes of
SHA-256("{seed}:{r}"). A resource key is mapped into row r by a keyed
BLAKE2b-64 digest of its UTF-8 bytes, reduced modulo width. Rows are
therefore keyed independently, and any implementation using the same
derivation reproduces the same columns for the same seed.

Error bound: with probability >= 1 - delta, estimate(x) <= true(x) +
epsilon * N where N is the total amount added, epsilon = e / width and
delta = e^-depth.

References:
    Cormode & Muthukrishnan, "An Improved Data Stream Summary:
    The Count-Min Sketch and its Applications", 2005.
"""

from __future__ import annotations

import hashlib
import math
from functools import lru_cache

from toplog_lite.domain.config import ConfigurationError, check_dimensions


@lru_cache(maxsize=64)
def row_keys(seed: int, depth: int) -> tuple[bytes, ...]:
    """Derive one 16-byte hashing key per row from the configured seed."""
    return tuple(
        hashlib.sha256(f"{seed}:{r}".encode("ascii")).digest()[:16]
        for r in range(depth)
    )


# The count and size sketches of a run share (seed, depth, width), so the
# columns for a hot key are computed once and reused by both.
@lru_cache(maxsize=8192)
def _columns(item: str, seed: int, depth: int, width: int) -> tuple[int, ...]:
    data = item.encode("utf-8")
    return tuple(
        int.from_bytes(
            hashlib.blake2b(data, digest_size=8, key=k).digest(), "big"
        ) % width
        for k in row_keys(seed, depth)
    )


class CountMinSketch:
    """Count-Min Sketch over string keys.

    Parameters:
        depth: Number of rows / independent hash functions.
        width: Number of counters per row.
        seed: Seed the per-row hash keys are derived from.

    Counters only ever grow: there is no decrement.
    """

    __slots__ = ("_depth", "_width", "_seed", "_tables", "_total")

    def __init__(self, depth: int, width: int, seed: int = 0) -> None:
        check_dimensions(depth, width)
        self._depth = depth
        self._width = width
        self._seed = seed
        self._total = 0
        self._tables: list[list[int]] = [[0] * width for _ in range(depth)]

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def total(self) -> int:
        """Sum of every amount added."""
        return self._total

    def columns(self, item: str) -> tuple[int, ...]:
        """Column index of item in each row."""
        return _columns(item, self._seed, self._depth, self._width)

    def add(self, item: str, amount: int = 1) -> None:
        """Add amount to item's counter in every row."""
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        for row, col in zip(self._tables, self.columns(item)):
            row[col] += amount
        self._total += amount

    def estimate(self, item: str) -> int:
        """Minimum counter across rows. Always >= the true amount."""
        return min(row[col] for row, col in zip(self._tables, self.columns(item)))

    def compatible_with(self, other: CountMinSketch) -> bool:
        return (
            self._depth == other._depth
            and self._width == other._width
            and self._seed == other._seed
        )

    def merge(self, other: CountMinSketch) -> None:
        """Element-wise add other's counters into this sketch.

        Valid because addition is associative and commutative: the merged
        sketch equals one that saw both streams. Both sketches must share
        depth, width and seed.
        """
        if other is self:
            raise ConfigurationError("cannot merge a sketch into itself")
        if not self.compatible_with(other):
            raise ConfigurationError(
                "cannot merge sketches with different (depth, width, seed): "
                f"({self._depth}, {self._width}, {self._seed}) vs "
                f"({other._depth}, {other._width}, {other._seed})"
            )
        for mine, theirs in zip(self._tables, other._tables):
            for j, v in enumerate(theirs):
                if v:
                    mine[j] += v
        self._total += other._total

    def memory_bytes(self) -> int:
        """Nominal counter storage, 8 bytes per counter."""
        return self._depth * self._width * 8

    def epsilon(self) -> float:
        """Relative width of the error band.

        total is the summed amount (bytes for a size sketch), so the
        overestimate bound epsilon * total is in the same unit.
        """
        return math.e / self._width

    def delta(self) -> float:
        """Chance that any single estimate exceeds the epsilon * total band."""
        return math.e ** (-self._depth)
