from __future__ import annotations

import pytest

from sandtime.clock import FakeClock
from sandtime.fps import FrameCounter


def test_rate_refreshes_once_per_window() -> None:
    clock = FakeClock()
    counter = FrameCounter(clock=clock)
    assert counter.label == "0 fps"

    refreshed = []
    for _ in range(4):
        clock.advance(0.125)
        refreshed.append(counter.tick())

    assert refreshed == [False, False, False, True]
    assert counter.fps == 8.0
    assert str(counter) == "8 fps"
    assert counter.history() == [0.125] * 4


def test_slow_frames_report_seconds_per_frame() -> None:
    clock = FakeClock()
    counter = FrameCounter(clock=clock)
    clock.advance(2.0)
    assert counter.tick() is True
    assert counter.fps == 0.5
    assert counter.label == "2 spf"


def test_history_is_bounded() -> None:
    clock = FakeClock()
    counter = FrameCounter(clock=clock, history=3)
    for i in range(5):
        clock.advance(0.01 * (i + 1))
        counter.tick()
    assert counter.history() == pytest.approx([0.03, 0.04, 0.05])


def test_wait_idles_until_frame_budget_spent() -> None:
    clock = FakeClock()
    calls: list[float] = []

    def idle() -> None:
        calls.append(clock.now())
        clock.advance(0.25)

    counter = FrameCounter(clock=clock, idle=idle)
    counter.wait(2.0)
    assert len(calls) == 2

    # Budget is capped at one second per frame.
    calls.clear()
    counter.wait(0.5)
    assert len(calls) == 4

    calls.clear()
    counter.wait(0)
    assert calls == []


def test_invalid_settings_are_rejected() -> None:
    with pytest.raises(ValueError):
        FrameCounter(clock=FakeClock(), window_s=0)
    with pytest.raises(ValueError):
        FrameCounter(clock=FakeClock(), history=0)
