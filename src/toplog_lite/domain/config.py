"""Counting configuration and its validation.

All parameters are checked up front so a bad configuration fails before
a single event is consumed.
"""
from __future__ import annotations

import math
from dataclasses import dataclass


class ConfigurationError(ValueError):
    """Raised for invalid counting parameters (k, depth, width, seed)."""


def check_top_k(k: int) -> int:
    if isinstance(k, bool) or not isinstance(k, int) or k < 0:
        raise ConfigurationError(f"k must be a non-negative integer, got {k!r}")
    return k


def check_dimensions(depth: int, width: int) -> None:
    for name, value in (("depth", depth), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(
                f"{name} must be a positive integer, got {value!r}"
            )


@dataclass(frozen=True, slots=True)
class CountConfig:
    """Parameters for one counting run.

    Defaults match the production settings used for the top-10 report:
    depth 10, width 10,000, seed 0.
    """
    k: int = 10
    depth: int = 10
    width: int = 10_000
    seed: int = 0

    def __post_init__(self) -> None:
        check_top_k(self.k)
        check_dimensions(self.depth, self.width)
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ConfigurationError(f"seed must be an integer, got {self.seed!r}")

    @classmethod
    def from_error_bounds(
        cls,
        k: int,
        epsilon: float,
        delta: float,
        seed: int = 0,
    ) -> CountConfig:
        """Size the sketch from Count-Min error bounds.

        width = ceil(e / epsilon) bounds the overestimate by epsilon * N;
        depth = ceil(ln(1 / delta)) bounds the probability of exceeding it.
        """
        if not epsilon > 0:
            raise ConfigurationError(f"epsilon must be positive, got {epsilon!r}")
        if not 0 < delta < 1:
            raise ConfigurationError(f"delta must be in (0, 1), got {delta!r}")
        return cls(
            k=k,
            depth=math.ceil(math.log(1.0 / delta)),
            width=math.ceil(math.e / epsilon),
            seed=seed,
        )
