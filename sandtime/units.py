"""Duration unit conversions.

``minutes(2)`` turns two minutes into seconds; ``to_minutes(120)`` turns
seconds back into minutes. Seconds are the common unit everywhere else in
the package.
"""

from __future__ import annotations

DAYS_PER_YEAR = 365.242190402


def nanoseconds(t: float) -> float:
    return t / 1_000_000_000.0


def microseconds(t: float) -> float:
    return t / 1_000_000.0


def milliseconds(t: float) -> float:
    return t / 1000.0


def seconds(t: float) -> float:
    return t


def minutes(t: float) -> float:
    return t * 60.0


def hours(t: float) -> float:
    return t * minutes(60.0)


def days(t: float) -> float:
    return t * hours(24.0)


def weeks(t: float) -> float:
    return t * days(7.0)


def years(t: float) -> float:
    return t * days(DAYS_PER_YEAR)


def to_nanoseconds(t: float) -> float:
    return t * 1_000_000_000.0


def to_microseconds(t: float) -> float:
    return t * 1_000_000.0


def to_milliseconds(t: float) -> float:
    return t * 1000.0


def to_seconds(t: float) -> float:
    return t


def to_minutes(t: float) -> float:
    return t / 60.0


def to_hours(t: float) -> float:
    return t / minutes(60.0)


def to_days(t: float) -> float:
    return t / hours(24.0)


def to_weeks(t: float) -> float:
    return t / days(7.0)


def to_years(t: float) -> float:
    return t / days(DAYS_PER_YEAR)
