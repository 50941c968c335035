"""Log decoding and event selection.

Public API:
    parse_line / parse_lines: access-log text -> LogRecord
    successful_get: the default record predicate (GET + 2xx)
    select_events: LogRecord stream -> Event stream
"""

from toplog_lite.parsing.filters import select_events, successful_get, to_event
from toplog_lite.parsing.log_line import LogParseError, parse_line, parse_lines

__all__ = [
    "LogParseError",
    "parse_line",
    "parse_lines",
    "select_events",
    "successful_get",
    "to_event",
]
