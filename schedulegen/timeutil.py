"""
Time arithmetic for 'HH:MM' strings.

All times are same-day 24h clock values; there is no overnight wraparound.
"""

from __future__ import annotations


def _split_time(hhmm: str) -> tuple[int, int]:
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h, m


def time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    h, m = _split_time(hhmm)
    return h * 60 + m


def time_to_hours(hhmm: str) -> float:
    """
    Convert 'HH:MM' to decimal hours (e.g. '10:30' -> 10.5).
    """
    h, m = _split_time(hhmm)
    return h + m / 60


def to_12_hour_format(time24: str) -> str:
    """
    '13:00' -> '1:00', '00:05' -> '12:05'.

    The minute part is kept as written; a missing one becomes '00'.
    """
    hour_str, _, minute_str = time24.partition(":")
    hour = int(hour_str) % 12
    if hour == 0:
        hour = 12
    return f"{hour}:{minute_str or '00'}"


def hour_label(hour: int) -> str:
    """Short gridline label: 8 -> '8a', 12 -> '12p', 17 -> '5p'."""
    h = hour % 12
    if h == 0:
        h = 12
    suffix = "p" if hour >= 12 else "a"
    return f"{h}{suffix}"
