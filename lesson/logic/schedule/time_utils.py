"""Time helpers shared by the importer, the projector and the weekly grid.

All times are plain ``HH:MM`` strings (24-hour, zero padded). Empty string
means "not set" and is never treated as midnight.
"""
from __future__ import annotations
import re
from typing import Dict, Optional

from lesson.utilities.config import PIXELS_PER_HOUR

__all__ = ["parse_time_range", "format_time", "time_to_minutes", "time_to_offset", "slot_height"]

_RANGE_PATTERN = re.compile(r'(\d{1,2}:\d{2})\s*-\s*(\d{1,2}:\d{2})\s*(AM|PM)?', re.IGNORECASE)
_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})$')


def _to_24_hour(value: str, meridiem: str) -> str:
    hours, minutes = value.split(':')
    hour = int(hours)
    if meridiem == 'PM' and hour != 12:
        hour += 12
    elif meridiem == 'AM' and hour == 12:
        hour = 0
    return f"{hour:02d}:{minutes}"


def parse_time_range(text: str) -> Dict[str, str]:
    """Parse ``"8:30 - 8:50 AM"`` style ranges into ``{"start", "end"}``.

    A trailing AM/PM applies to both ends and converts them to 24-hour form.
    Without it the matched text is passed through untouched ("1:00 - 1:10"
    gives ``1:00``/``1:10``). Anything that does not match yields empty strings.
    """
    match = _RANGE_PATTERN.search(text or '')
    if not match:
        return {"start": "", "end": ""}
    start, end, meridiem = match.group(1), match.group(2), match.group(3)
    if meridiem:
        meridiem = meridiem.upper()
        start = _to_24_hour(start, meridiem)
        end = _to_24_hour(end, meridiem)
    return {"start": start, "end": end}


def time_to_minutes(time: str) -> Optional[int]:
    """Minutes since midnight for ``H:MM``/``HH:MM``, or None if unparseable."""
    match = _TIME_PATTERN.match((time or '').strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour * 60 + minute


def format_time(time: str) -> str:
    """Render ``HH:MM`` as ``H:MM AM/PM`` (``13:05`` -> ``1:05 PM``)."""
    if not time:
        return ''
    minutes = time_to_minutes(time)
    if minutes is None:
        return time
    hour, minute = divmod(minutes, 60)
    suffix = 'PM' if hour >= 12 else 'AM'
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


def time_to_offset(time: str, grid_start_hour: int, pixels_per_hour: float) -> float:
    """Vertical pixel offset of ``time`` from the top of the grid.

    Times before the grid start give negative values and times after the
    visible window overflow; clipping is left to the caller.
    """
    minutes = time_to_minutes(time)
    if minutes is None:
        raise ValueError(f"Invalid time: {time!r}")
    return (minutes - grid_start_hour * 60) / 60 * pixels_per_hour


def slot_height(start: str, end: Optional[str], min_height: float,
                pixels_per_hour: float = PIXELS_PER_HOUR) -> float:
    start_minutes = time_to_minutes(start)
    if start_minutes is None:
        return min_height
    end_minutes = time_to_minutes(end) if end else None
    if end_minutes is None:
        end_minutes = start_minutes
    return max((end_minutes - start_minutes) / 60 * pixels_per_hour, min_height)
