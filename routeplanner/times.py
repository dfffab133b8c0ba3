"""Minute-of-day time arithmetic.

Times of day are encoded as an integer number of minutes in
``[0, 1440)``. Durations between two times wrap past midnight, so
``minutes_between("23:50", "00:10") == 20``.
"""

from __future__ import annotations

import math
from typing import Union

from .domain.errors import make_invalid_argument_error

MINUTES_PER_DAY = 1440

TimeLike = Union[int, str]


def time_to_minutes(value: str) -> int:
    """Convert an ``HH:MM`` string (optionally suffixed with ``Z``) to minutes."""
    if not isinstance(value, str) or not value.strip():
        raise make_invalid_argument_error("time_to_minutes", "value", value)

    text = value.strip().rstrip("Zz").strip()
    hours_text, sep, minutes_text = text.partition(":")
    if not sep or not hours_text.isdigit() or not minutes_text.isdigit():
        raise make_invalid_argument_error(
            "time_to_minutes", "value", value, "HH:MM time string"
        )

    hours = int(hours_text)
    minutes = int(minutes_text)
    if hours > 23 or minutes > 59:
        raise make_invalid_argument_error(
            "time_to_minutes", "value", value, "HH:MM time string"
        )
    return 60 * hours + minutes


def to_minutes(value: TimeLike) -> int:
    """Normalize a time string or minute-of-day integer."""
    if isinstance(value, bool):
        raise make_invalid_argument_error(
            "to_minutes", "value", value, "minute-of-day or HH:MM string"
        )
    if isinstance(value, int):
        if not 0 <= value < MINUTES_PER_DAY:
            raise make_invalid_argument_error(
                "to_minutes", "value", value, "minute-of-day in [0, 1440)"
            )
        return value
    return time_to_minutes(value)


def minutes_to_midnight(minutes: int) -> int:
    return MINUTES_PER_DAY - to_minutes(minutes)


def minutes_between(start: TimeLike, end: TimeLike) -> int:
    """Return the minutes elapsed from ``start`` to the next ``end``.

    When ``end`` is earlier in the day than ``start`` it is taken to be
    on the following day.
    """
    first = to_minutes(start)
    second = to_minutes(end)
    if second >= first:
        return second - first
    return minutes_to_midnight(first) + second


def minutes_to_time(minutes: int) -> str:
    """Format a number of minutes as an ``HH:MM`` time of day."""
    if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
        raise make_invalid_argument_error(
            "minutes_to_time", "minutes", minutes, "non-negative integer"
        )
    of_day = minutes % MINUTES_PER_DAY
    return f"{of_day // 60:02}:{of_day % 60:02}"


def add_minutes_to_time(value: TimeLike, minutes: int) -> str:
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise make_invalid_argument_error(
            "add_minutes_to_time", "minutes", minutes, "integer"
        )
    return minutes_to_time((to_minutes(value) + minutes) % MINUTES_PER_DAY)


def human_readable_duration(minutes: float) -> str:
    """Pretty-print a duration, e.g. ``1505`` -> ``"1d 1h 5m"``."""
    if isinstance(minutes, bool) or not isinstance(minutes, (int, float)):
        raise make_invalid_argument_error(
            "human_readable_duration", "minutes", minutes, "finite number"
        )
    if not math.isfinite(minutes) or minutes < 0:
        raise make_invalid_argument_error(
            "human_readable_duration", "minutes", minutes, "finite number"
        )

    total = int(minutes)
    days, remainder = divmod(total, MINUTES_PER_DAY)
    hours, mins = divmod(remainder, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if mins or not parts:
        parts.append(f"{mins}m")
    return " ".join(parts)
