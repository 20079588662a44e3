from __future__ import annotations

from collections import deque
from collections.abc import Callable

from .clock import Clock, MonotonicTimer, wink

DEFAULT_WINDOW_S = 0.5
DEFAULT_HISTORY = 120


class FrameCounter:
    """Frame-rate counter and limiter.

    Call :meth:`tick` once per frame. Every ``window_s`` seconds the rate is
    recomputed and the label refreshed ("60 fps", or "2 spf" below one frame
    per second). :meth:`wait` idles until the frame budget for a target rate
    is spent.
    """

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        idle: Callable[[], None] | None = None,
        window_s: float = DEFAULT_WINDOW_S,
        history: int = DEFAULT_HISTORY,
    ) -> None:
        if window_s <= 0:
            raise ValueError("window_s must be > 0")
        if history <= 0:
            raise ValueError("history must be > 0")
        self._window = MonotonicTimer(clock)
        self._frame_timer = MonotonicTimer(clock)
        self._limiter = MonotonicTimer(clock)
        self._idle = idle if idle is not None else wink
        self._window_s = float(window_s)
        self._history: deque[float] = deque(maxlen=int(history))
        self._frames = 0
        self._fps = 0.0
        self._label = "0 fps"

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def label(self) -> str:
        return self._label

    def __str__(self) -> str:
        return self._label

    def history(self) -> list[float]:
        """Frame durations in seconds, oldest first."""
        return list(self._history)

    def tick(self) -> bool:
        """Count a frame. Returns True when the rate was just refreshed."""

        self._frames += 1
        self._history.append(self._frame_timer.elapsed_s())
        self._frame_timer.reset()

        sec = self._window.elapsed_s()
        if sec < self._window_s:
            return False

        frames = self._frames
        self._frames = 0
        self._fps = frames / sec
        if self._fps >= 1.0:
            self._label = f"{int(self._fps)} fps"
        else:
            self._label = f"{int(sec / frames)} spf"
        self._window.reset()
        return True

    def wait(self, target_fps: float) -> None:
        if target_fps <= 0:
            return
        budget_s = min(1.0 / target_fps, 1.0)
        while self._limiter.elapsed_s() < budget_s:
            self._idle()
        self._limiter.reset()
