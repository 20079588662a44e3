"""Quantized lookup tables for easing curves.

Each curve gets its own table of ``samples`` values taken at
``i / (samples - 1)`` from the direct evaluator. A lookup truncates the
scaled phase to the sample below it; there is no interpolation.

Tables are built on first use. The build runs under a lock so concurrent
first lookups produce a single table; once a table exists reads do not
lock.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable
from functools import partial

from .tween import CURVES, Curve, evaluate

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 256

# Absorbs the rounding in (k / (n - 1)) * (n - 1) so exact sample phases hit sample k.
_INDEX_SNAP = 1e-9


class TweenLUTCache:
    def __init__(self, samples: int = DEFAULT_SAMPLES) -> None:
        if samples < 2:
            raise ValueError("samples must be >= 2")
        self._samples = int(samples)
        self._tables: dict[Curve | int, tuple[float, ...]] = {}
        self._lock = threading.Lock()

    @property
    def samples(self) -> int:
        return self._samples

    def is_built(self, curve: Curve | int) -> bool:
        return curve in self._tables

    def table(self, curve: Curve | int) -> tuple[float, ...]:
        table = self._tables.get(curve)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(curve)
            if table is None:
                table = self._build(curve)
                self._tables[curve] = table
        return table

    def lookup(self, curve: Curve | int, phase: float) -> float:
        # NaN falls through to 0 as well.
        if not phase > 0.0:
            return 0.0
        if phase >= 1.0:
            return 1.0
        table = self.table(curve)
        index = int(math.floor(phase * (self._samples - 1) + _INDEX_SNAP))
        return table[min(index, self._samples - 1)]

    def _build(self, curve: Curve | int) -> tuple[float, ...]:
        last = self._samples - 1
        table = tuple(evaluate(curve, i / last) for i in range(self._samples))
        logger.debug("built %d-sample table for curve %r", self._samples, curve)
        return table


DEFAULT_CACHE = TweenLUTCache()


def memoized(curve: Curve | int, cache: TweenLUTCache | None = None) -> Callable[[float], float]:
    """Return a one-argument evaluator for ``curve`` backed by a lookup table."""

    return partial((cache or DEFAULT_CACHE).lookup, curve)


MEMOIZED: dict[Curve, Callable[[float], float]] = {curve: memoized(curve) for curve in CURVES}
