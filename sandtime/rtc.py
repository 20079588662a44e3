"""Scalable logical clock.

``LogicalClock`` anchors an absolute instant (integer Unix seconds) and adds
the time measured by an inner :class:`~sandtime.clock.MonotonicTimer`,
scaled by a speed factor. The clock can be paused, resumed, re-anchored and
exported to or imported from a ``"YYYY-MM-DD HH:MM:SS"`` string in local
time.

Reading the clock never mutates it. :meth:`LogicalClock.update` is the
explicit "tick": it folds the whole scaled seconds measured so far into the
anchor and restarts the timer, keeping the sub-second remainder.

Importing a malformed string does not raise. The clock falls back to the
epoch and the returned :class:`ParseResult` reports ``ok=False``.
"""

from __future__ import annotations

import logging
import math
import re
import time
from collections.abc import Callable
from dataclasses import dataclass

from .clock import Clock, MonotonicTimer

logger = logging.getLogger(__name__)

SERIAL_FORMAT = "%Y-%m-%d %H:%M:%S"

_DELIMITERS = re.compile(r"[:\-/ ]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InvalidArgument(ValueError):
    """Raised when a clock setting violates its precondition."""


@dataclass(frozen=True, slots=True)
class ParseResult:
    instant: int
    ok: bool


def _as_int(token: str) -> int:
    # Leading digits only: "07pm" -> 7, "pm" -> 0.
    m = _LEADING_INT.match(token)
    return int(m.group(1)) if m else 0


def tokenize(text: str) -> list[str]:
    """Split on ``: - /`` and space, dropping empty tokens."""

    return [tok for tok in _DELIMITERS.split(text) if tok]


class LogicalClock:
    def __init__(
        self,
        instant: float | None = None,
        *,
        clock: Clock | None = None,
        wall: Callable[[], float] | None = None,
    ) -> None:
        self._timer = MonotonicTimer(clock)
        self._wall = wall if wall is not None else time.time
        self._speed = 1.0
        self._held = False
        self._anchor = 0
        self._carry_s = 0.0
        self.set(self._wall() if instant is None else instant)

    @classmethod
    def from_string(cls, text: str, *, clock: Clock | None = None) -> "LogicalClock":
        rtc = cls(0, clock=clock)
        rtc.deserialize(text)
        return rtc

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def held(self) -> bool:
        return self._held

    def get(self) -> int:
        return self._anchor

    def __float__(self) -> float:
        return float(self._anchor)

    def __int__(self) -> int:
        return self._anchor

    def __repr__(self) -> str:
        return f"LogicalClock({self.serialize()!r}, speed={self._speed}, held={self._held})"

    # -- Mutation -----------------------------------------------------------
    def set(self, instant: float) -> None:
        """Re-anchor at ``instant``, restart the timer and clear the hold."""

        self._held = False
        self._anchor = int(instant)
        self._carry_s = 0.0
        self._timer.reset()

    def reset(self) -> None:
        self.set(0)

    def set_speed(self, factor: float) -> None:
        if not factor > 0.0:
            raise InvalidArgument(f"speed factor must be > 0, got {factor!r}")
        self._speed = float(factor)
        logger.debug("clock speed set to %s", self._speed)

    def pause(self) -> None:
        if self._held:
            return
        self._carry_s += self._timer.elapsed_s()
        self._held = True

    def resume(self) -> float:
        """Clear the hold and return the scaled seconds not yet folded."""

        if self._held:
            # Time spent paused is discarded here.
            self._timer.reset()
            self._held = False
        return self.elapsed_s()

    def update(self) -> int:
        if self._held:
            return self._anchor
        elapsed = self.elapsed_s()
        whole = math.floor(elapsed)
        remainder_s = (elapsed - whole) / self._speed
        self.set(self._anchor + whole)
        self._carry_s = remainder_s
        return self._anchor

    # -- Reads --------------------------------------------------------------
    def elapsed_s(self) -> float:
        running = 0.0 if self._held else self._timer.elapsed_s()
        return self._speed * (self._carry_s + running)

    def current_instant(self) -> int:
        return self._anchor + math.floor(self.elapsed_s())

    def format(self, fmt: str) -> str:
        return time.strftime(fmt, time.localtime(self._anchor))

    def _broken_down(self) -> time.struct_time:
        return time.localtime(self._anchor)

    @property
    def year(self) -> int:
        return self._broken_down().tm_year

    @property
    def month(self) -> int:
        return self._broken_down().tm_mon

    @property
    def day(self) -> int:
        return self._broken_down().tm_mday

    @property
    def hour(self) -> int:
        return self._broken_down().tm_hour

    @property
    def minute(self) -> int:
        return self._broken_down().tm_min

    @property
    def second(self) -> int:
        return self._broken_down().tm_sec

    # -- Import / export ----------------------------------------------------
    def serialize(self) -> str:
        return self.format(SERIAL_FORMAT)

    def deserialize(self, text: str) -> ParseResult:
        tokens = tokenize(text)
        if len(tokens) < 6:
            logger.debug("malformed time string %r, falling back to epoch", text)
            self.set(0)
            return ParseResult(instant=0, ok=False)

        year, month, day, hour, minute, second = (_as_int(tok) for tok in tokens[:6])
        try:
            # struct_time months are 1-based; tm_isdst=-1 lets the host decide on DST.
            instant = int(time.mktime((year, month, day, hour, minute, second, 0, 0, -1)))
        except (OverflowError, ValueError) as exc:
            logger.debug("unrepresentable time string %r (%s), falling back to epoch", text, exc)
            self.set(0)
            return ParseResult(instant=0, ok=False)

        self._speed = 1.0
        self.set(instant)
        return ParseResult(instant=instant, ok=True)
