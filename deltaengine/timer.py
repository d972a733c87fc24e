"""A restartable stopwatch measuring seconds."""

from __future__ import annotations

import time


class Timer:
    """Measures the seconds passed since creation or the last reset."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def reset(self) -> None:
        """Start measuring again from now."""
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since the timer was started or last reset."""
        return time.perf_counter() - self._start