"""Frame time measurement."""

from __future__ import annotations

import time
from collections.abc import Callable


class DeltaTimer:
    """Reports seconds elapsed since the previous reading."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._previous = clock()

    def delta_seconds(self) -> float:
        """Seconds since the last call, or since construction on the first call."""
        now = self._clock()
        delta = now - self._previous
        self._previous = now
        return delta / 1_000_000_000.0


_default_timer = DeltaTimer()


def get_time_delta_seconds() -> float:
    """Seconds since the previous call, measured from module import at first."""
    return _default_timer.delta_seconds()