"""Time sources.

Expiry bookkeeping reads a monotonic clock so wall-clock adjustments cannot
shorten or stretch a dedup window. The liveness endpoint reports wall time.
Both are injectable so tests can move time by hand.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current time in seconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()


class WallClock:
    """Clock backed by ``time.time`` (seconds since the epoch)."""

    def now(self) -> float:
        return time.time()
