"""Millisecond wall-clock time and a precise sleep."""

from __future__ import annotations

import time

__all__ = ["timestamp_ms", "sleep_ms"]

_POLL_SECONDS = 0.0005


def timestamp_ms() -> int:
    """The current wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def sleep_ms(milliseconds: int) -> None:
    """Wait until at least *milliseconds* have passed, polling in short steps."""
    start = timestamp_ms()
    while timestamp_ms() - start < milliseconds:
        time.sleep(_POLL_SECONDS)