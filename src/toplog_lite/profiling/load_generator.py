"""Generate synthetic access-log lines for accuracy and timing runs.

Traffic pattern:
  - with probability 1 - high_cardinality_probability, a line drawn
    uniformly from a small canned pool of real-looking requests (a mix
    of GET/POST and 2xx/4xx, so the event filter has work to do)
  - otherwise a line for a random one-off path with a random method
    (GET/PUT), status (200/400) and size (< 200,000 bytes)

The random lines inflate key cardinality without changing which canned
paths are the heavy hitters, which is exactly the regime the sketch
strategy is meant for. Timestamps advance one second per line from a
fixed start so output is reproducible for a given seed.
"""
from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Iterator

# (request, status, size)
CANNED_REQUESTS: tuple[tuple[str, int, int], ...] = (
    ("GET /images/opf-logo.gif HTTP/1.0", 200, 32511),
    ("GET /images/ksclogosmall.gif HTTP/1.0", 200, 3635),
    ("GET /images/ksclogosmall.gif HTTP/1.0", 403, 298),
    ("GET /images/example.variable.gif HTTP/1.0", 200, 5512),
    ("GET /images/example.variable.gif HTTP/1.0", 200, 4125),
    ("GET /home.html HTTP/1.0", 200, 5326),
    ("POST /postFile HTTP/1.0", 201, 3255125),
    ("GET /live-lb HTTP/1.0", 200, 10),   # tiny sizes show the largest relative error
    ("GET /live-lb HTTP/1.0", 404, 10),
)

_START = datetime(2017, 8, 20, 0, 0, 0, tzinfo=timezone(timedelta(hours=-7)))


def format_line(ts: datetime, request: str, status: int, size: int) -> str:
    return f'[{ts.strftime("%d/%b/%Y:%H:%M:%S %z")}] "{request}" {status} {size}'


class LoadGenerator:
    """Produce a reproducible stream of access-log lines."""

    __slots__ = ("_rng", "_num_events", "_high_cardinality_probability")

    def __init__(
        self,
        num_events: int = 10_000,
        seed: int = 0,
        high_cardinality_probability: float = 0.2,
    ) -> None:
        if num_events < 0:
            raise ValueError(f"num_events must be non-negative, got {num_events}")
        if not 0.0 <= high_cardinality_probability <= 1.0:
            raise ValueError(
                "high_cardinality_probability must be in [0, 1], "
                f"got {high_cardinality_probability}"
            )
        self._rng = random.Random(seed)
        self._num_events = num_events
        self._high_cardinality_probability = high_cardinality_probability

    @property
    def num_events(self) -> int:
        return self._num_events

    def lines(self) -> Iterator[str]:
        rng = self._rng
        for i in range(self._num_events):
            ts = _START + timedelta(seconds=i)
            if rng.random() >= self._high_cardinality_probability:
                request, status, size = rng.choice(CANNED_REQUESTS)
            else:
                method = "GET" if rng.random() < 0.5 else "PUT"
                path = f"/{rng.getrandbits(32)}"
                request = f"{method} {path} HTTP/1.1"
                status = 200 if rng.random() < 0.5 else 400
                size = rng.randrange(200_000)
            yield format_line(ts, request, status, size)

    def generate(self) -> list[str]:
        return list(self.lines())
