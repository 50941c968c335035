"""toplog-lite: top-K requested resources and bytes from access logs.

The counting core exposes three entry points:

    exact_top_k(events, k)
    approximate_top_k(events, k, depth, width, seed)
    evaluate(truth, results)
"""

from toplog_lite.analytics import approximate_top_k, evaluate, exact_top_k

__all__ = ["approximate_top_k", "evaluate", "exact_top_k"]
