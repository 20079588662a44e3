"""Tests for the easing-curve catalogue.

Values are checked against hand-computed points of the standard easing
formulas; the power families are also checked for point symmetry.
"""

from __future__ import annotations

import math

import pytest

from sandtime import tween
from sandtime.tween import CURVES, Curve, CurveSample, evaluate, name_of, try_evaluate

PHASES = [i / 100 for i in range(101)]


def test_catalogue_is_closed_and_enumerable() -> None:
    assert len(CURVES) == 38
    assert Curve.UNDEFINED not in CURVES
    assert set(CURVES) == set(Curve) - {Curve.UNDEFINED}


@pytest.mark.parametrize("curve", [*CURVES, Curve.UNDEFINED, 999])
def test_boundaries_are_exact(curve: Curve | int) -> None:
    for phase in (-5.0, -1e-9, 0.0):
        assert evaluate(curve, phase) == 0.0
    for phase in (1.0, 1.0 + 1e-9, 7.0):
        assert evaluate(curve, phase) == 1.0


def test_linear_is_identity() -> None:
    for phase in PHASES:
        assert evaluate(Curve.LINEAR, phase) == phase


@pytest.mark.parametrize(
    ("curve_in", "curve_out"),
    [
        (Curve.QUAD_IN, Curve.QUAD_OUT),
        (Curve.CUBIC_IN, Curve.CUBIC_OUT),
        (Curve.QUART_IN, Curve.QUART_OUT),
        (Curve.QUINT_IN, Curve.QUINT_OUT),
    ],
)
def test_power_curves_are_point_symmetric(curve_in: Curve, curve_out: Curve) -> None:
    for phase in PHASES:
        assert math.isclose(
            evaluate(curve_in, phase),
            1.0 - evaluate(curve_out, 1.0 - phase),
            abs_tol=1e-5,
        )


@pytest.mark.parametrize(
    ("curve", "phase", "expected"),
    [
        (Curve.QUAD_IN, 0.5, 0.25),
        (Curve.QUAD_OUT, 0.5, 0.75),
        (Curve.QUAD_INOUT, 0.25, 0.125),
        (Curve.CUBIC_IN, 0.5, 0.125),
        (Curve.CUBIC_INOUT, 0.75, 0.9375),
        (Curve.QUART_IN, 0.5, 0.0625),
        (Curve.QUINT_OUT, 0.5, 0.96875),
        (Curve.SINE_IN, 0.5, 1.0 - math.cos(math.pi / 4.0)),
        (Curve.SINE_OUT, 0.5, math.sin(math.pi / 4.0)),
        (Curve.SINE_INOUT, 0.5, 0.5),
        (Curve.EXPO_IN, 0.5, 0.03125),
        (Curve.EXPO_OUT, 0.5, 0.96875),
        (Curve.EXPO_INOUT, 0.5, 0.5),
        (Curve.CIRC_IN, 0.6, 0.2),
        (Curve.CIRC_OUT, 0.4, 0.8),
        (Curve.CIRC_INOUT, 0.5, 0.5),
        (Curve.BACK_IN, 0.5, 0.25 * (2.70158 * 0.5 - 1.70158)),
        (Curve.BACK_OUT, 0.5, 1.0 - 0.25 * (2.70158 * 0.5 - 1.70158)),
        (Curve.ELASTIC_OUT, 0.1, 1.25),
        (Curve.ELASTIC_IN, 0.9, -0.25),
        (Curve.BOUNCE_OUT, 1.0 / 2.75, 1.0),
        (Curve.BOUNCE_OUT, 0.5 / 2.75, 0.25),
        (Curve.BOUNCE_IN, 1.0 - 0.5 / 2.75, 0.75),
        (Curve.BOUNCE_INOUT, 0.5, 0.5),
        (Curve.SINE_SQUARE, 0.5, 0.5),
        (Curve.EXPONENTIAL, 0.5, 0.5),
        (Curve.SCHUBRING1, 0.25, 0.125),
        (Curve.SCHUBRING1, 0.75, 0.875),
        (Curve.ACCEL_BREAK, 0.5, 0.5),
        (Curve.SIN_PI2, 1.0 / 3.0, 0.5),
    ],
)
def test_known_values(curve: Curve, phase: float, expected: float) -> None:
    assert evaluate(curve, phase) == pytest.approx(expected, abs=1e-9)


def test_schubring_composites() -> None:
    p1 = evaluate(Curve.SCHUBRING1, 0.25)
    p2 = tween.schubring1(p1)
    assert evaluate(Curve.SCHUBRING2, 0.25) == pytest.approx(p2)
    assert evaluate(Curve.SCHUBRING3, 0.25) == pytest.approx((p1 + p2) / 2.0)


def test_back_inout_uses_scaled_overshoot() -> None:
    s = 1.70158 * 1.525
    t = 0.5  # 0.25 * 2
    assert evaluate(Curve.BACK_INOUT, 0.25) == pytest.approx(0.5 * t * t * ((s + 1.0) * t - s))


def test_overshooting_curves_leave_unit_range() -> None:
    low = min(evaluate(Curve.BACK_IN, p) for p in PHASES)
    high = max(evaluate(Curve.ELASTIC_OUT, p) for p in PHASES)
    assert low < 0.0
    assert high > 1.0


@pytest.mark.parametrize("curve", [c for c in CURVES if not c.name.startswith(("ELASTIC", "BACK"))])
def test_bounded_curves_stay_in_unit_range(curve: Curve) -> None:
    for phase in PHASES:
        assert -1e-9 <= evaluate(curve, phase) <= 1.0 + 1e-9


def test_integer_discriminants_dispatch() -> None:
    assert evaluate(int(Curve.QUAD_IN), 0.5) == 0.25


def test_unrecognized_curve_defaults_to_zero() -> None:
    assert evaluate(999, 0.5) == 0.0
    assert evaluate(Curve.UNDEFINED, 0.5) == 0.0
    assert try_evaluate(999, 0.5) == CurveSample(value=0.0, recognized=False)
    assert try_evaluate(Curve.QUAD_IN, 0.5) == CurveSample(value=0.25, recognized=True)


def test_names_are_stable_and_unique() -> None:
    assert name_of(Curve.BACK_IN) == "BACK_IN"
    assert name_of(int(Curve.LINEAR)) == "LINEAR"
    assert name_of(999) == "UNDEFINED"
    assert name_of(-1) == "UNDEFINED"
    names = [name_of(c) for c in CURVES]
    assert len(set(names)) == len(names)


def test_waves() -> None:
    assert tween.ping(0.3) == 0.3
    assert tween.pong(0.25) == 0.75
    assert tween.pingpong(0.25) == 0.5
    assert tween.pingpong(0.75) == 0.5
    assert tween.sinus(0.25) == 1.0
    assert tween.sinus(0.5) == 0.0
    assert tween.sinus(0.75) == -1.0
