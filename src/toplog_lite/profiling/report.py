"""Plain-text formatting for counting results and comparisons."""
from __future__ import annotations

from typing import Sequence

from toplog_lite.analytics.accuracy import AccuracyReport
from toplog_lite.domain.results import Result
from toplog_lite.profiling.harness import ComparisonResult


def format_results(results: Sequence[Result]) -> str:
    """One "key size" line per result, in result order."""
    return "\n".join(f"{r.key} {r.size}" for r in results)


def _metric(value: float | None) -> str:
    return "undefined" if value is None else f"{value:.4f}"


def format_accuracy(report: AccuracyReport) -> str:
    return (
        f"Recall: {_metric(report.recall)}  "
        f"Precision: {_metric(report.precision)}  "
        f"F1: {_metric(report.f1)}  "
        f"(matched {report.matched})"
    )


def format_comparison(result: ComparisonResult) -> str:
    """Side-by-side table of exact and sketch results plus accuracy."""
    lines = [
        f"Events counted:    {result.events_counted:,}",
        f"Distinct keys:     {result.distinct_keys:,}",
        f"Exact time:        {result.exact_time_ms:.1f} ms",
        f"Sketch time:       {result.approximate_time_ms:.1f} ms",
        f"Sketch memory:     {result.sketch_bytes:,} bytes",
        "",
        f"{'Rank':<5} {'Exact':<40} {'Size':>12}   {'Sketch':<40} {'Size':>12}",
        "-" * 115,
    ]
    rows = max(len(result.exact), len(result.approximate))
    for i in range(rows):
        e = result.exact[i] if i < len(result.exact) else None
        a = result.approximate[i] if i < len(result.approximate) else None
        lines.append(
            f"{i + 1:<5} {e.key if e else '':<40} {e.size if e else '':>12}   "
            f"{a.key if a else '':<40} {a.size if a else '':>12}"
        )
    lines.append("")
    lines.append(format_accuracy(result.accuracy))
    return "\n".join(lines)
