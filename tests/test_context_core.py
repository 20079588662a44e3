from __future__ import annotations

from sandtime.clock import FakeClock
from sandtime.context import ProcessClock
from sandtime.rtc import LogicalClock


def test_now_and_runtime_follow_the_timer() -> None:
    clock = FakeClock()
    process = ProcessClock(clock=clock, wall=lambda: 1000.7)
    assert process.epoch == 1000.0
    assert process.now() == 1000.0
    assert process.runtime() == 0.0

    clock.advance(2.5)
    assert process.runtime() == 2.5
    assert process.now() == 1002.5


def test_lapse_shifts_both_readings() -> None:
    clock = FakeClock()
    process = ProcessClock(clock=clock, wall=lambda: 50.0)
    process.lapse(10.0)
    process.lapse(-4.0)
    assert process.offset == 6.0
    assert process.runtime() == 6.0
    assert process.now() == 56.0


def test_context_seeds_logical_clocks() -> None:
    process = ProcessClock(clock=FakeClock(), wall=lambda: 1_600_000_000.0)
    process.lapse(30.0)
    rtc = LogicalClock(process.now(), clock=FakeClock())
    assert rtc.get() == 1_600_000_030
