"""Shared helpers for counting tests."""
from __future__ import annotations

import random

from toplog_lite.domain.events import Event


SEED = 42

PATH_POOL = [
    "/images/opf-logo.gif", "/images/ksclogosmall.gif",
    "/images/example.variable.gif", "/home.html", "/live-lb",
    "/shuttle/countdown/", "/shuttle/missions/sts-71/",
    "/images/NASA-logosmall.gif", "/images/KSC-logosmall.gif",
    "/history/apollo/", "/images/MOSAIC-logosmall.gif",
    "/images/USA-logosmall.gif", "/images/WORLD-logosmall.gif",
    "/ksc.html", "/facilities/lc39a.html",
]


def make_events(triples: list[tuple[str, int, int]]) -> list[Event]:
    """Expand (key, amount, repeat) triples into an event list."""
    events = []
    for key, amount, repeat in triples:
        events.extend(Event(key=key, amount=amount) for _ in range(repeat))
    return events


def zipf_events(
    n: int,
    keys: list[str] | None = None,
    seed: int = SEED,
    noise: float = 0.0,
) -> list[Event]:
    """Zipf-like traffic over keys; noise is the share of one-off random keys.

    Each key has a fixed byte size so exact totals are count * size.
    """
    rng = random.Random(seed)
    keys = keys or PATH_POOL
    weights = [1.0 / (i + 1) for i in range(len(keys))]
    sizes = {k: 100 + 37 * i for i, k in enumerate(keys)}
    events = []
    for _ in range(n):
        if noise and rng.random() < noise:
            events.append(Event(key=f"/{rng.getrandbits(32)}", amount=rng.randrange(200_000)))
        else:
            key = rng.choices(keys, weights=weights)[0]
            events.append(Event(key=key, amount=sizes[key]))
    return events
