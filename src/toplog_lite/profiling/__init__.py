"""Synthetic load, strategy comparison and report formatting."""

from toplog_lite.profiling.harness import ComparisonResult, compare_strategies, run_synthetic
from toplog_lite.profiling.load_generator import LoadGenerator

__all__ = [
    "ComparisonResult",
    "LoadGenerator",
    "compare_strategies",
    "run_synthetic",
]
