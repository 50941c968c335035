"""Run both counting strategies over the same input and compare them.

The log lines are decoded and filtered once; the resulting events are
fed to the exact counter and to the sketch counter, each timed
separately. The exact result is the ground truth for the accuracy
report.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterable

from toplog_lite.analytics.accuracy import AccuracyReport, evaluate
from toplog_lite.analytics.approximate import ApproximateCounter
from toplog_lite.analytics.exact import ExactCounter
from toplog_lite.domain.config import CountConfig
from toplog_lite.domain.results import Result
from toplog_lite.parsing.filters import select_events
from toplog_lite.parsing.log_line import parse_lines
from toplog_lite.profiling.load_generator import LoadGenerator


@dataclass(slots=True)
class ComparisonResult:
    """Outputs and timings from one exact-vs-sketch run."""
    events_counted: int
    distinct_keys: int
    exact: list[Result]
    approximate: list[Result]
    accuracy: AccuracyReport
    exact_time_ms: float
    approximate_time_ms: float
    sketch_bytes: int


def compare_strategies(
    lines: Iterable[str],
    config: CountConfig | None = None,
) -> ComparisonResult:
    """Count lines both ways and evaluate the sketch result against the exact one."""
    config = config or CountConfig()
    events = list(select_events(parse_lines(lines)))

    exact = ExactCounter(config.k)
    t0 = time.perf_counter()
    for event in events:
        exact.add(event)
    exact_results = exact.results()
    exact_ms = (time.perf_counter() - t0) * 1000

    approx = ApproximateCounter.from_config(config)
    t0 = time.perf_counter()
    for event in events:
        approx.add(event)
    approx_results = approx.results()
    approx_ms = (time.perf_counter() - t0) * 1000

    return ComparisonResult(
        events_counted=len(events),
        distinct_keys=exact.distinct_keys,
        exact=exact_results,
        approximate=approx_results,
        accuracy=evaluate(exact_results, approx_results),
        exact_time_ms=exact_ms,
        approximate_time_ms=approx_ms,
        sketch_bytes=approx.memory_bytes(),
    )


def run_synthetic(
    num_events: int = 10_000,
    seed: int = 0,
    high_cardinality_probability: float = 0.2,
    config: CountConfig | None = None,
) -> ComparisonResult:
    """compare_strategies over LoadGenerator output."""
    gen = LoadGenerator(
        num_events=num_events,
        seed=seed,
        high_cardinality_probability=high_cardinality_probability,
    )
    return compare_strategies(gen.lines(), config)
