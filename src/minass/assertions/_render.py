"""Rendering helpers for values and durations in failure messages."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from rich.pretty import pretty_repr

from minass.config import get_config

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def render_value(value: Any) -> str:
    """Dump a value for a failure message; strings are shown verbatim."""
    if isinstance(value, str):
        return value
    config = get_config()
    return pretty_repr(
        value,
        max_width=config.max_width,
        max_length=config.max_length,
        max_string=config.max_string,
        expand_all=config.expand_all,
    )


def type_name(value: Any) -> str:
    return type(value).__name__


def to_seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def _nanoseconds(duration: float | timedelta) -> int:
    if isinstance(duration, timedelta):
        return (duration // timedelta(microseconds=1)) * _MICROSECOND
    return round(duration * _SECOND)


def _fraction(value: int, unit: int) -> str:
    whole, rest = divmod(value, unit)
    if not rest:
        return str(whole)
    digits = str(rest).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def format_duration(duration: float | timedelta) -> str:
    """Format a duration as ``1h2m3.5s``, ``250ms``, ``1.5µs`` and so on.

    Floats are taken as seconds.
    """
    ns = _nanoseconds(duration)
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _MICROSECOND:
        return f"{sign}{ns}ns"
    if ns < _MILLISECOND:
        return f"{sign}{_fraction(ns, _MICROSECOND)}µs"
    if ns < _SECOND:
        return f"{sign}{_fraction(ns, _MILLISECOND)}ms"

    hours, rest = divmod(ns, _HOUR)
    minutes, rest = divmod(rest, _MINUTE)

    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_fraction(rest, _SECOND)}s"
