"""Epoch-millisecond clock for response timestamps."""

import time

_WALL_ANCHOR_NS = time.time_ns()
_MONOTONIC_ANCHOR_NS = time.monotonic_ns()


def now_ms() -> int:
    """Milliseconds since the Unix epoch.

    Anchored to the wall clock once at import and advanced by the
    monotonic clock, so sequential calls never go backwards even if the
    system clock is adjusted.
    """
    elapsed_ns = time.monotonic_ns() - _MONOTONIC_ANCHOR_NS
    return (_WALL_ANCHOR_NS + elapsed_ns) // 1_000_000
