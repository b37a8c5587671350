"""Tests for clocks."""

import time

from strillone.core.clock import MonotonicClock, WallClock


def test_monotonic_clock_never_goes_back() -> None:
    """Test monotonic clock readings are non-decreasing."""
    clock = MonotonicClock()
    first = clock.now()
    second = clock.now()

    assert second >= first


def test_wall_clock_is_epoch_seconds() -> None:
    """Test wall clock tracks time.time."""
    before = time.time()
    value = WallClock().now()
    after = time.time()

    assert before <= value <= after
