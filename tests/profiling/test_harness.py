"""Tests for the strategy comparison harness and reports."""
from __future__ import annotations

from toplog_lite.analytics.accuracy import AccuracyReport
from toplog_lite.domain.config import CountConfig
from toplog_lite.domain.results import Result
from toplog_lite.profiling.harness import compare_strategies, run_synthetic
from toplog_lite.profiling.report import format_accuracy, format_comparison, format_results


class TestHarness:
    def test_synthetic_run(self):
        result = run_synthetic(num_events=2000, config=CountConfig(k=3))
        assert 0 < result.events_counted < 2000
        assert len(result.exact) == 3
        assert len(result.approximate) == 3
        assert result.accuracy.recall == 1.0
        assert result.sketch_bytes == 2 * 10 * 10_000 * 8
        assert result.exact_time_ms >= 0
        assert result.approximate_time_ms >= 0

    def test_compare_canned_lines(self):
        lines = [
            '[01/Aug/1995:00:54:59 -0400] "GET /a HTTP/1.0" 200 100',
            '[01/Aug/1995:00:55:00 -0400] "GET /a HTTP/1.0" 200 100',
            '[01/Aug/1995:00:55:01 -0400] "GET /a HTTP/1.0" 200 100',
            '[01/Aug/1995:00:55:02 -0400] "GET /b HTTP/1.0" 200 50',
            '[01/Aug/1995:00:55:03 -0400] "GET /b HTTP/1.0" 200 50',
            '[01/Aug/1995:00:55:04 -0400] "GET /b HTTP/1.0" 404 50',
            "not a log line",
        ]
        result = compare_strategies(lines, CountConfig(k=1, depth=4, width=64))
        assert result.events_counted == 5
        assert result.distinct_keys == 2
        assert result.exact == [Result("/a", 300)]
        assert result.approximate == [Result("/a", 300)]

    def test_empty_input(self):
        result = compare_strategies([], CountConfig(k=5, depth=2, width=8))
        assert result.exact == []
        assert result.approximate == []
        assert result.accuracy.recall is None


class TestReport:
    def test_format_results(self):
        text = format_results([Result("/a", 300), Result("/b", 100)])
        assert text == "/a 300\n/b 100"

    def test_format_accuracy_undefined(self):
        text = format_accuracy(AccuracyReport(None, None, None, 0))
        assert "Recall: undefined" in text
        assert "F1: undefined" in text

    def test_format_accuracy_values(self):
        text = format_accuracy(AccuracyReport(1.0, 0.98765, 0.99378, 5))
        assert "Recall: 1.0000" in text
        assert "Precision: 0.9877" in text

    def test_format_comparison(self):
        result = run_synthetic(num_events=500, config=CountConfig(k=2, depth=4, width=256))
        text = format_comparison(result)
        assert "Events counted:" in text
        assert result.exact[0].key in text
        assert "Recall:" in text
