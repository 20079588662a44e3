"""Human-readable relative times ("3 minutes ago", "in 2 days")."""

from __future__ import annotations

_DAY_S = 86400


def _split(diff_s: float) -> tuple[int, int]:
    diff = int(abs(diff_s))
    return diff, diff // _DAY_S


def ago(diff_s: float) -> str:
    """Describe ``diff_s`` seconds in the past."""

    diff, day_diff = _split(diff_s)
    if day_diff == 0:
        if diff_s < 60:
            return "just now"
        if diff_s < 120:
            return "a minute ago"
        if diff_s < 3600:
            return f"{diff // 60} minutes ago"
        if diff_s < 7200:
            return "an hour ago"
        return f"{diff // 3600} hours ago"
    if day_diff == 1:
        return "yesterday"
    if day_diff <= 13:
        return f"{day_diff} days ago"
    if day_diff < 31:
        return f"{day_diff // 7} weeks ago"
    if day_diff < 62:
        return "a month ago"
    if day_diff < 365:
        return f"{day_diff // 31} months ago"
    if day_diff < 730:
        return "a year ago"
    return f"{day_diff // 365} years ago"


def in_(diff_s: float) -> str:
    """Describe ``diff_s`` seconds in the future."""

    diff, day_diff = _split(diff_s)
    if day_diff == 0:
        if diff_s < 60:
            return "right now"
        if diff_s < 120:
            return "in a minute"
        if diff_s < 3600:
            return f"in {diff // 60} minutes"
        if diff_s < 7200:
            return "in an hour"
        return f"in {diff // 3600} hours"
    if day_diff == 1:
        return "tomorrow"
    if day_diff <= 13:
        return f"in {day_diff} days"
    if day_diff < 31:
        return f"in {day_diff // 7} weeks"
    if day_diff < 62:
        return "in a month"
    if day_diff < 365:
        return f"in {day_diff // 31} months"
    if day_diff < 730:
        return "in a year"
    return f"in {day_diff // 365} years"
