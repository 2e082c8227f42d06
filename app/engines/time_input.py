"""
Parsing and formatting of raw result input.

Time-based results are stored as seconds.  For timed disciplines where less
is better (runs) athletes type ``MM:SS``; everything else is a plain number,
with a decimal comma accepted.
"""

from __future__ import annotations

import math

from app.catalog.disciplines import Direction, Discipline

TIME_UNITS = ("sec", "min")


def is_time_unit(unit: str) -> bool:
    return unit in TIME_UNITS


def should_use_time_input(unit: str, direction: Direction | str) -> bool:
    """``MM:SS`` entry applies to timed lower-better disciplines."""
    return unit == "sec" and Direction(direction) == Direction.LOWER_BETTER


def parse_time_to_seconds(raw: str) -> int:
    """Parse ``MM:SS`` (or a bare number of seconds) into whole seconds.

    Raises :class:`ValueError` on malformed input, negative values or
    seconds outside ``0..59``.
    """
    text = raw.strip()

    if ":" in text:
        parts = text.split(":")
        if len(parts) != 2:
            raise ValueError(f"Expected MM:SS, got {raw!r}")
        try:
            minutes = int(parts[0])
            seconds = int(parts[1])
        except ValueError:
            raise ValueError(f"Expected MM:SS, got {raw!r}") from None
        if minutes < 0 or not 0 <= seconds < 60:
            raise ValueError(f"Out of range time {raw!r}")
        return minutes * 60 + seconds

    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"Not a number of seconds: {raw!r}") from None
    if number < 0 or not math.isfinite(number):
        raise ValueError(f"Negative or invalid seconds: {raw!r}")
    return int(number + 0.5)


def format_seconds(total_seconds: float) -> str:
    """Format seconds as ``MM:SS`` (negative values show as ``00:00``)."""
    if total_seconds < 0:
        return "00:00"
    minutes, seconds = divmod(int(total_seconds + 0.5), 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_time_display(total_seconds: float) -> str:
    """Short durations as ``N сек``, longer ones as ``MM:SS``."""
    if total_seconds < 60:
        return f"{int(total_seconds + 0.5)} сек"
    return format_seconds(total_seconds)


def parse_result_value(raw: str, discipline: Discipline) -> float:
    """Parse athlete input for *discipline* into the stored numeric value."""
    if should_use_time_input(discipline.unit, discipline.direction):
        return float(parse_time_to_seconds(raw))
    try:
        value = float(raw.strip().replace(",", "."))
    except ValueError:
        raise ValueError(f"Not a number: {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {raw!r}")
    return value


def format_result_value(value: float, discipline: Discipline) -> str:
    """Human-readable value in the discipline's input format.

    Other timed disciplines (holds) read as ``N сек`` or ``MM:SS``.
    """
    if should_use_time_input(discipline.unit, discipline.direction):
        return format_seconds(value)
    if is_time_unit(discipline.unit):
        return format_time_display(value)
    if float(value).is_integer():
        return str(int(value))
    return str(value)
