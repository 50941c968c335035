"""Top-K counting over access-log events.

Public API:
    exact_top_k: exact per-key counting (ground truth)
    approximate_top_k: two Count-Min Sketches + bounded top-K set
    evaluate: recall / precision / F1 of one result list against another

Building blocks:
    CountMinSketch, BoundedTopK, ExactCounter, ApproximateCounter
"""

from toplog_lite.analytics.accuracy import AccuracyReport, evaluate
from toplog_lite.analytics.approximate import ApproximateCounter, approximate_top_k
from toplog_lite.analytics.countmin import CountMinSketch
from toplog_lite.analytics.exact import ExactCounter, exact_top_k
from toplog_lite.analytics.topk import BoundedTopK

__all__ = [
    "AccuracyReport",
    "ApproximateCounter",
    "BoundedTopK",
    "CountMinSketch",
    "ExactCounter",
    "approximate_top_k",
    "evaluate",
    "exact_top_k",
]
