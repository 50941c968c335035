"""Accuracy of an approximate top-K result against exact ground truth.

    recall     share of the ground-truth keys that the candidate list found
    precision  mean size agreement min/max over keys present in both lists
    f1         harmonic mean of the two

A metric that cannot be computed (empty ground truth, no matched keys,
precision + recall == 0) is None, never 0.0. These are pure functions
for validating the sketch strategy; nothing in the counting path calls
them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from toplog_lite.domain.results import Result


@dataclass(frozen=True, slots=True)
class AccuracyReport:
    recall: float | None
    precision: float | None
    f1: float | None
    matched: int


def recall(truth: Sequence[Result], results: Sequence[Result]) -> float | None:
    """How many of the results are contained in the true set."""
    if not truth:
        return None
    true_keys = {t.key for t in truth}
    found = sum(1 for r in results if r.key in true_keys)
    return found / len(truth)


def _agreement(a: int, b: int) -> float:
    hi = max(a, b)
    if hi == 0:
        return 1.0  # both zero: identical
    return min(a, b) / hi


def _matched_pairs(
    truth: Sequence[Result], results: Sequence[Result]
) -> list[tuple[Result, Result]]:
    by_key = {t.key: t for t in truth}
    return [(by_key[r.key], r) for r in results if r.key in by_key]


def precision(truth: Sequence[Result], results: Sequence[Result]) -> float | None:
    """Size-weighted accuracy over keys both lists agree on."""
    pairs = _matched_pairs(truth, results)
    if not pairs:
        return None
    return sum(_agreement(t.size, r.size) for t, r in pairs) / len(pairs)


def f1_score(p: float | None, r: float | None) -> float | None:
    """Harmonic mean of precision p and recall r."""
    if p is None or r is None:
        return None
    denom = p + r
    if denom == 0:
        return None
    return 2 * p * r / denom


def evaluate(truth: Sequence[Result], results: Sequence[Result]) -> AccuracyReport:
    """Compute recall, precision and F1 for results against truth."""
    r = recall(truth, results)
    p = precision(truth, results)
    return AccuracyReport(
        recall=r,
        precision=p,
        f1=f1_score(p, r),
        matched=len(_matched_pairs(truth, results)),
    )
