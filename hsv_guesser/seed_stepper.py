"""Deterministic 16-bit seed stepping used by every round of the guesser."""

from __future__ import annotations

import time
from typing import Iterator, Optional


UINT16_MAX = 0xFFFF
MULTIPLIER = 65521
TWIST = (32771, 16411, 14009, 11003)


def next_seed(seed: int) -> int:
    """Return the successor of ``seed`` in the 16-bit color stream."""
    seed &= UINT16_MAX
    # The twist is picked from the low bits before the multiply.
    return ((seed * MULTIPLIER) ^ TWIST[seed & 0x3]) & UINT16_MAX


def initial_seed(now_ms: Optional[int] = None) -> int:
    """Truncate a millisecond wall-clock reading to a 16-bit seed."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return now_ms & UINT16_MAX


def seed_stream(seed: int, count: int) -> Iterator[int]:
    """Yield ``count`` seeds, starting with ``seed`` itself."""
    if count < 0:
        raise ValueError("count must be non-negative")
    current = seed & UINT16_MAX
    for _ in range(count):
        yield current
        current = next_seed(current)
