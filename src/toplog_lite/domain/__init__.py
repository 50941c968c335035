"""Domain types: decoded records, events, results and configuration."""

from toplog_lite.domain.config import ConfigurationError, CountConfig
from toplog_lite.domain.events import Event, LogRecord
from toplog_lite.domain.results import Candidate, CountStats, Result

__all__ = [
    "Candidate",
    "ConfigurationError",
    "CountConfig",
    "CountStats",
    "Event",
    "LogRecord",
    "Result",
]
