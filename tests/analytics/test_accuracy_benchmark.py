"""Benchmark: exact vs sketch top-K at scale.

Prints the numbers so a run doubles as a report of what the sketch
costs and how close it gets on this data.
"""
from __future__ import annotations

import sys

import pytest

from toplog_lite.analytics.accuracy import evaluate
from toplog_lite.analytics.approximate import ApproximateCounter, approximate_top_k
from toplog_lite.analytics.exact import ExactCounter, exact_top_k
from toplog_lite.domain.config import CountConfig
from toplog_lite.profiling.harness import run_synthetic

from tests.analytics.conftest import PATH_POOL, zipf_events


@pytest.mark.benchmark
class TestSketchVsExact:
    def test_wide_sketch_zipf_100k(self):
        """depth=10, width >= 10x cardinality: full recall, near-exact sizes."""
        events = zipf_events(100_000)
        truth = exact_top_k(events, 5)
        approx = approximate_top_k(events, 5, depth=10, width=10 * len(PATH_POOL))
        report = evaluate(truth, approx)

        print(f"\n  Zipf 100K events, {len(PATH_POOL)} keys, width={10 * len(PATH_POOL)}:")
        print(f"  Recall: {report.recall:.3f}  Precision: {report.precision:.4f}")

        assert report.recall == 1.0
        assert report.precision >= 0.95

    def test_noisy_traffic_memory(self):
        """30% one-off keys: exact memory grows, sketch memory does not."""
        events = zipf_events(100_000, noise=0.3)
        exact = ExactCounter(5)
        approx = ApproximateCounter.create(5, depth=10, width=10_000)
        for e in events:
            exact.add(e)
            approx.add(e)
        report = evaluate(exact.results(), approx.results())

        exact_mem = sys.getsizeof(exact._counts) + exact.distinct_keys * 120
        print(f"\n  Noisy 100K events, {exact.distinct_keys:,} distinct keys:")
        print(f"  Exact memory: ~{exact_mem / 1024:.0f} KB")
        print(f"  Sketch memory: {approx.memory_bytes() / 1024:.0f} KB (fixed)")
        print(f"  Recall: {report.recall:.3f}  Precision: {report.precision:.4f}  F1: {report.f1:.4f}")

        assert report.recall == 1.0
        assert report.precision >= 0.9

    def test_generated_logs_default_config(self):
        """Synthetic access log, 20% random paths, production sketch size."""
        result = run_synthetic(num_events=50_000, seed=0, config=CountConfig(k=5))
        acc = result.accuracy

        print(f"\n  Generated log, {result.events_counted:,} qualifying events:")
        print(f"  Exact: {result.exact_time_ms:.0f} ms  Sketch: {result.approximate_time_ms:.0f} ms")
        print(f"  Recall: {acc.recall:.3f}  Precision: {acc.precision:.4f}  F1: {acc.f1:.4f}")

        assert acc.recall == 1.0
        assert acc.f1 >= 0.95
        assert [r.key for r in result.exact] == [r.key for r in result.approximate]
