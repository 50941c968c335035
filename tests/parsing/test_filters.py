"""Tests for the shared event filter."""
from __future__ import annotations

from toplog_lite.domain.events import Event
from toplog_lite.parsing.filters import select_events, successful_get, to_event
from toplog_lite.parsing.log_line import parse_line

from tests.parsing.conftest import DASH_SIZE_LINE, FORBIDDEN_LINE, GOOD_LINE, POST_LINE


class TestSuccessfulGet:
    def test_get_200(self):
        assert successful_get(parse_line(GOOD_LINE))

    def test_post_rejected(self):
        assert not successful_get(parse_line(POST_LINE))

    def test_non_2xx_rejected(self):
        assert not successful_get(parse_line(FORBIDDEN_LINE))
        assert not successful_get(parse_line(DASH_SIZE_LINE))


class TestSelectEvents:
    def test_default_predicate(self):
        records = [parse_line(l) for l in (GOOD_LINE, POST_LINE, FORBIDDEN_LINE)]
        assert list(select_events(records)) == [
            Event(key="/images/opf-logo.gif", amount=32511)
        ]

    def test_custom_predicate(self):
        records = [parse_line(l) for l in (GOOD_LINE, POST_LINE)]
        events = list(select_events(records, lambda r: r.method == "POST"))
        assert events == [Event(key="/postFile", amount=3255125)]

    def test_to_event(self):
        assert to_event(parse_line(GOOD_LINE)) == Event("/images/opf-logo.gif", 32511)
