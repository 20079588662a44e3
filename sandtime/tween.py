"""Easing curves over the normalized phase [0, 1].

Every curve is a closed-form function of the phase. Most stay within
[0, 1]; the elastic and back families overshoot on purpose. The named
functions below are the raw formulas and expect ``0 < t < 1``;
:func:`evaluate` adds the boundary handling and dispatches through
:data:`FORMULAS`.

Unknown curve discriminants evaluate to ``0.0`` and are named
``"UNDEFINED"`` instead of raising, so render loops never have to guard
the call. :func:`try_evaluate` reports whether the curve was recognized.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

PI = math.pi

BACK_OVERSHOOT = 1.70158
BACK_INOUT_SCALE = 1.525

ELASTIC_AMPLITUDE = 1.0
ELASTIC_PERIOD = 0.3
ELASTIC_INOUT_PERIOD = 0.3 * 1.5

BOUNCE_SCALE = 7.5625
BOUNCE_SPAN = 2.75


class Curve(IntEnum):
    UNDEFINED = 0
    LINEAR = 1
    QUAD_IN = 2
    QUAD_OUT = 3
    QUAD_INOUT = 4
    CUBIC_IN = 5
    CUBIC_OUT = 6
    CUBIC_INOUT = 7
    QUART_IN = 8
    QUART_OUT = 9
    QUART_INOUT = 10
    QUINT_IN = 11
    QUINT_OUT = 12
    QUINT_INOUT = 13
    SINE_IN = 14
    SINE_OUT = 15
    SINE_INOUT = 16
    EXPO_IN = 17
    EXPO_OUT = 18
    EXPO_INOUT = 19
    CIRC_IN = 20
    CIRC_OUT = 21
    CIRC_INOUT = 22
    ELASTIC_IN = 23
    ELASTIC_OUT = 24
    ELASTIC_INOUT = 25
    BACK_IN = 26
    BACK_OUT = 27
    BACK_INOUT = 28
    BOUNCE_IN = 29
    BOUNCE_OUT = 30
    BOUNCE_INOUT = 31
    SINE_SQUARE = 32
    EXPONENTIAL = 33
    SCHUBRING1 = 34
    SCHUBRING2 = 35
    SCHUBRING3 = 36
    ACCEL_BREAK = 37
    SIN_PI2 = 38


@dataclass(frozen=True, slots=True)
class CurveSample:
    value: float
    recognized: bool


# -- Power curves -------------------------------------------------------------
def linear(t: float) -> float:
    return t


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return (2.0 - t) * t


def quad_inout(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t
    t -= 1.0
    return -0.5 * (t * (t - 2.0) - 1.0)


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1.0
    return 1.0 + t * t * t


def cubic_inout(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t * t
    t -= 2.0
    return 0.5 * (t * t * t + 2.0)


def quart_in(t: float) -> float:
    return t * t * t * t


def quart_out(t: float) -> float:
    t -= 1.0
    return 1.0 - t * t * t * t


def quart_inout(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t * t * t
    t -= 2.0
    return -0.5 * (t * t * t * t - 2.0)


def quint_in(t: float) -> float:
    return t * t * t * t * t


def quint_out(t: float) -> float:
    t -= 1.0
    return 1.0 + t * t * t * t * t


def quint_inout(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t * t * t * t
    t -= 2.0
    return 0.5 * (t * t * t * t * t + 2.0)


# -- Sinusoidal, exponential, circular ----------------------------------------
def sine_in(t: float) -> float:
    return 1.0 - math.cos(t * (PI / 2.0))


def sine_out(t: float) -> float:
    return math.sin(t * (PI / 2.0))


def sine_inout(t: float) -> float:
    return -0.5 * (math.cos(PI * t) - 1.0)


def expo_in(t: float) -> float:
    return math.pow(2.0, 10.0 * (t - 1.0))


def expo_out(t: float) -> float:
    return 1.0 - (0.0 if t == 1.0 else math.pow(2.0, -10.0 * t))


def expo_inout(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * math.pow(2.0, 10.0 * (t - 1.0))
    t -= 1.0
    return 0.5 * (-math.pow(2.0, -10.0 * t) + 2.0)


def circ_in(t: float) -> float:
    return 1.0 - math.sqrt(1.0 - t * t)


def circ_out(t: float) -> float:
    t -= 1.0
    return math.sqrt(1.0 - t * t)


def circ_inout(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return -0.5 * (math.sqrt(1.0 - t * t) - 1.0)
    t -= 2.0
    return 0.5 * (math.sqrt(1.0 - t * t) + 1.0)


# -- Elastic and back (overshooting) ------------------------------------------
def elastic_in(t: float) -> float:
    p = ELASTIC_PERIOD
    s = p / 4.0
    t -= 1.0
    return -(ELASTIC_AMPLITUDE * math.pow(2.0, 10.0 * t) * math.sin((t - s) * (2.0 * PI) / p))


def elastic_out(t: float) -> float:
    p = ELASTIC_PERIOD
    s = p / 4.0
    return ELASTIC_AMPLITUDE * math.pow(2.0, -10.0 * t) * math.sin((t - s) * (2.0 * PI) / p) + 1.0


def elastic_inout(t: float) -> float:
    p = ELASTIC_INOUT_PERIOD
    s = p / 4.0
    t *= 2.0
    if t < 1.0:
        t -= 1.0
        return -0.5 * (ELASTIC_AMPLITUDE * math.pow(2.0, 10.0 * t) * math.sin((t - s) * (2.0 * PI) / p))
    t -= 1.0
    return ELASTIC_AMPLITUDE * math.pow(2.0, -10.0 * t) * math.sin((t - s) * (2.0 * PI) / p) * 0.5 + 1.0


def back_in(t: float) -> float:
    s = BACK_OVERSHOOT
    return t * t * ((s + 1.0) * t - s)


def back_out(t: float) -> float:
    s = BACK_OVERSHOOT
    t -= 1.0
    return t * t * ((s + 1.0) * t + s) + 1.0


def back_inout(t: float) -> float:
    s = BACK_OVERSHOOT * BACK_INOUT_SCALE
    t *= 2.0
    if t < 1.0:
        return 0.5 * (t * t * ((s + 1.0) * t - s))
    t -= 2.0
    return 0.5 * (t * t * ((s + 1.0) * t + s) + 2.0)


# -- Bounce -------------------------------------------------------------------
def _bounce(t: float) -> float:
    if t < 1.0 / BOUNCE_SPAN:
        return BOUNCE_SCALE * t * t
    if t < 2.0 / BOUNCE_SPAN:
        t -= 1.5 / BOUNCE_SPAN
        return BOUNCE_SCALE * t * t + 0.75
    if t < 2.5 / BOUNCE_SPAN:
        t -= 2.25 / BOUNCE_SPAN
        return BOUNCE_SCALE * t * t + 0.9375
    t -= 2.625 / BOUNCE_SPAN
    return BOUNCE_SCALE * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1.0 - _bounce(1.0 - t)


def bounce_out(t: float) -> float:
    return _bounce(t)


def bounce_inout(t: float) -> float:
    if t < 0.5:
        return (1.0 - _bounce(1.0 - t * 2.0)) * 0.5
    return _bounce(t * 2.0 - 1.0) * 0.5 + 0.5


# -- Custom and composite -----------------------------------------------------
def sine_square(t: float) -> float:
    a = math.sin(0.5 * t * PI)
    return a * a


def exponential(t: float) -> float:
    return 1.0 / (1.0 + math.exp(6.0 - 12.0 * t))


def _schubring_pass(t: float) -> float:
    return 2.0 * (t + (0.5 - t) * abs(0.5 - t)) - 0.5


def schubring1(t: float) -> float:
    return _schubring_pass(t)


def schubring2(t: float) -> float:
    return _schubring_pass(_schubring_pass(t))


def schubring3(t: float) -> float:
    p1 = _schubring_pass(t)
    p2 = _schubring_pass(p1)
    return (p1 + p2) / 2.0


def accel_break(t: float) -> float:
    return (math.sin(t * PI - PI * 0.5) + 1.0) * 0.5


def sin_pi2(t: float) -> float:
    return math.sin(t * 0.5 * PI)


FORMULAS: dict[Curve, Callable[[float], float]] = {
    Curve.LINEAR: linear,
    Curve.QUAD_IN: quad_in,
    Curve.QUAD_OUT: quad_out,
    Curve.QUAD_INOUT: quad_inout,
    Curve.CUBIC_IN: cubic_in,
    Curve.CUBIC_OUT: cubic_out,
    Curve.CUBIC_INOUT: cubic_inout,
    Curve.QUART_IN: quart_in,
    Curve.QUART_OUT: quart_out,
    Curve.QUART_INOUT: quart_inout,
    Curve.QUINT_IN: quint_in,
    Curve.QUINT_OUT: quint_out,
    Curve.QUINT_INOUT: quint_inout,
    Curve.SINE_IN: sine_in,
    Curve.SINE_OUT: sine_out,
    Curve.SINE_INOUT: sine_inout,
    Curve.EXPO_IN: expo_in,
    Curve.EXPO_OUT: expo_out,
    Curve.EXPO_INOUT: expo_inout,
    Curve.CIRC_IN: circ_in,
    Curve.CIRC_OUT: circ_out,
    Curve.CIRC_INOUT: circ_inout,
    Curve.ELASTIC_IN: elastic_in,
    Curve.ELASTIC_OUT: elastic_out,
    Curve.ELASTIC_INOUT: elastic_inout,
    Curve.BACK_IN: back_in,
    Curve.BACK_OUT: back_out,
    Curve.BACK_INOUT: back_inout,
    Curve.BOUNCE_IN: bounce_in,
    Curve.BOUNCE_OUT: bounce_out,
    Curve.BOUNCE_INOUT: bounce_inout,
    Curve.SINE_SQUARE: sine_square,
    Curve.EXPONENTIAL: exponential,
    Curve.SCHUBRING1: schubring1,
    Curve.SCHUBRING2: schubring2,
    Curve.SCHUBRING3: schubring3,
    Curve.ACCEL_BREAK: accel_break,
    Curve.SIN_PI2: sin_pi2,
}

CURVES: tuple[Curve, ...] = tuple(FORMULAS)


def evaluate(curve: Curve | int, phase: float) -> float:
    """Evaluate ``curve`` at ``phase`` (0 at or below 0, 1 at or above 1)."""

    if phase <= 0.0:
        return 0.0
    if phase >= 1.0:
        return 1.0
    formula = FORMULAS.get(curve)
    if formula is None:
        return 0.0
    return formula(phase)


def try_evaluate(curve: Curve | int, phase: float) -> CurveSample:
    return CurveSample(value=evaluate(curve, phase), recognized=curve in FORMULAS)


def name_of(curve: Curve | int) -> str:
    try:
        return Curve(curve).name
    except ValueError:
        return Curve.UNDEFINED.name


# -- Waves ----------------------------------------------------------------------
def ping(t: float) -> float:
    return t


def pong(t: float) -> float:
    return 1.0 - t


def pingpong(t: float) -> float:
    return t + t if t < 0.5 else 2.0 - t - t


def sinus(t: float) -> float:
    """Triangle wave: 0 -> 1 -> -1 -> 0 over one period."""

    x4 = t * 4.0
    if x4 >= 3.0:
        return x4 - 4.0
    if x4 < 1.0:
        return x4
    return 2.0 - x4
