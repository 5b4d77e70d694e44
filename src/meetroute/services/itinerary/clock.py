"""Conversion between "HH:MM" wall-clock strings and minutes since midnight."""

from __future__ import annotations

from .errors import InvalidTimeFormat


def parse_clock(value: str) -> int:
    """Return minutes since midnight for an ``HH:MM`` string.

    Raises ``InvalidTimeFormat`` unless the value is exactly two
    colon-separated integers with hour 0-23 and minute 0-59.
    """
    if not isinstance(value, str):
        raise InvalidTimeFormat(value)
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidTimeFormat(value)
    hours, minutes = int(parts[0]), int(parts[1])
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormat(value)
    return hours * 60 + minutes


def format_clock(minutes: int) -> str:
    """Render minutes since midnight as zero-padded ``HH:MM``.

    No day wrap: 1500 renders as "25:00".
    """
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"
