from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock abstraction.

    Timers depend on this interface rather than calling real time directly.
    """

    def now(self) -> float:
        """Return monotonic seconds."""
        ...


class RealClock:
    """Production clock backed by time.perf_counter()."""

    def now(self) -> float:
        return time.perf_counter()


class FakeClock:
    """Deterministic test clock."""

    def __init__(self, *, start: float = 0.0) -> None:
        self._t = float(start)

    def now(self) -> float:
        return self._t

    def advance(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._t += float(dt)

    def set(self, t: float) -> None:
        self._t = float(t)


class MonotonicTimer:
    """Stopwatch over a :class:`Clock`.

    Reports the time since the last :meth:`reset`. The reading never goes
    backwards between resets, even if the underlying counter does.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else RealClock()
        self._start = 0.0
        self._last = 0.0
        self.reset()

    def reset(self) -> None:
        self._start = self._clock.now()
        self._last = 0.0

    def elapsed_s(self) -> float:
        elapsed = self._clock.now() - self._start
        if elapsed > self._last:
            self._last = elapsed
        return self._last

    def elapsed_ms(self) -> float:
        return self.elapsed_s() * 1000.0

    def elapsed_us(self) -> float:
        return self.elapsed_s() * 1_000_000.0

    def elapsed_ns(self) -> float:
        return self.elapsed_s() * 1_000_000_000.0


def sleep(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)


def wink() -> None:
    """Yield the CPU for about a millisecond."""
    time.sleep(0.001)
