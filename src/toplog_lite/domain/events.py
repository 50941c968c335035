"""Decoded access-log records and the counting events derived from them.

A LogRecord is everything the decoder pulls out of one log line. The
counting core never sees it: the event filter turns qualifying records
into Events, which carry only the resource key and its byte size. Each
Event implicitly contributes 1 to the key's request count.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from toplog_lite.domain.types import ByteCount, ResourceKey, StatusCode


@dataclass(frozen=True, slots=True)
class LogRecord:
    """One decoded access-log line. Immutable after decoding."""
    timestamp: datetime
    method: str              # "GET", "POST", ...
    path: ResourceKey
    protocol: str            # "HTTP/1.0"
    status: StatusCode
    size: ByteCount          # bytes transferred, 0 when logged as "-"

    @property
    def is_success(self) -> bool:
        """2xx status."""
        return 200 <= self.status < 300


@dataclass(frozen=True, slots=True)
class Event:
    """A single countable event: resource key plus the bytes it moved."""
    key: ResourceKey
    amount: ByteCount = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"amount must be non-negative, got {self.amount}")
