"""
Conversions between wall-clock time strings and minute offsets.
"""

import re

_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def convert_time_string_to_minutes(time_string: str) -> int:
    """
    Convert an ``HH:MM`` string to minutes since midnight.

    Raises:
        ValueError: If the string is not a valid time of day
    """
    match = _TIME_PATTERN.fullmatch(time_string)
    if not match:
        raise ValueError(f"Time must be formatted as HH:MM, got {time_string!r}")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Time out of range: {time_string!r}")

    return hours * 60 + minutes


def convert_minutes_to_time_string(minutes: int) -> str:
    """Convert minutes since midnight back to ``HH:MM``."""
    if not 0 <= minutes < 24 * 60:
        raise ValueError(f"Minutes must be between 0 and 1439, got {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
