"""Decoder for access-log lines.

Accepts the bracketed-timestamp form used by the NASA/Apache logs the
report was built for:

    [01/Aug/1995:00:54:59 -0400] "GET /images/opf-logo.gif HTTP/1.0" 200 32511

A leading host/ident/user prefix (common log format) is tolerated since
the pattern is searched, not anchored. A size of "-" means no body was
sent and decodes to 0.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Iterable, Iterator

from toplog_lite.domain.events import LogRecord

log = logging.getLogger(__name__)

LOG_PATTERN = re.compile(
    r'\[(?P<ts>[^\]]+)\] "(?P<method>\S+) (?P<path>\S+) (?P<proto>[^"]+)" '
    r"(?P<status>\S+) (?P<size>\S+)"
)
TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


class LogParseError(ValueError):
    """Raised when a line does not decode into a LogRecord."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Could not parse log line ({reason}): {line!r}")


def parse_line(line: str) -> LogRecord:
    """Decode a single line. Raises LogParseError on malformed input."""
    m = LOG_PATTERN.search(line)
    if m is None:
        raise LogParseError(line, "no match")
    try:
        timestamp = datetime.strptime(m.group("ts"), TIMESTAMP_FORMAT)
    except ValueError:
        raise LogParseError(line, "bad timestamp") from None
    try:
        status = int(m.group("status"))
        raw_size = m.group("size")
        size = 0 if raw_size == "-" else int(raw_size)
    except ValueError:
        raise LogParseError(line, "non-numeric status or size") from None
    if size < 0:
        raise LogParseError(line, "negative size")
    return LogRecord(
        timestamp=timestamp,
        method=m.group("method"),
        path=m.group("path"),
        protocol=m.group("proto"),
        status=status,
        size=size,
    )


def parse_lines(lines: Iterable[str]) -> Iterator[LogRecord]:
    """Decode lines lazily, logging and skipping the malformed ones.

    Blank lines are skipped silently.
    """
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\n")
        if not line.strip():
            continue
        try:
            yield parse_line(line)
        except LogParseError as exc:
            log.warning("line %d skipped: %s", lineno, exc.reason)
