from __future__ import annotations

import time
from collections.abc import Callable

from .clock import Clock, MonotonicTimer


class ProcessClock:
    """Application-wide time source.

    Created once at start-up and handed to whatever needs ``now()``.
    ``lapse()`` shifts both readings, e.g. to fast-forward a test harness.
    Not safe for concurrent ``lapse()`` calls.
    """

    def __init__(self, *, clock: Clock | None = None, wall: Callable[[], float] | None = None) -> None:
        self._timer = MonotonicTimer(clock)
        self._epoch = float(int((wall if wall is not None else time.time)()))
        self._offset = 0.0

    @property
    def epoch(self) -> float:
        return self._epoch

    @property
    def offset(self) -> float:
        return self._offset

    def now(self) -> float:
        """Absolute seconds: start-up wall time plus runtime."""
        return self._epoch + self.runtime()

    def runtime(self) -> float:
        return self._offset + self._timer.elapsed_s()

    def lapse(self, seconds: float) -> None:
        self._offset += float(seconds)
