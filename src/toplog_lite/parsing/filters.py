"""Event filter shared by both counting strategies.

Both the exact and the sketch-based counter read from select_events(),
so a comparison between them is always over the same input.
"""
from __future__ import annotations

from typing import Callable, Iterable, Iterator

from toplog_lite.domain.events import Event, LogRecord

RecordPredicate = Callable[[LogRecord], bool]


def successful_get(record: LogRecord) -> bool:
    """GET requests that completed with a 2xx status."""
    return record.method == "GET" and record.is_success


def to_event(record: LogRecord) -> Event:
    return Event(key=record.path, amount=record.size)


def select_events(
    records: Iterable[LogRecord],
    predicate: RecordPredicate = successful_get,
) -> Iterator[Event]:
    """Yield an Event for every record the predicate accepts."""
    for record in records:
        if predicate(record):
            yield to_event(record)
