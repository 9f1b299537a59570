"""Display formatting for dates and times.

Month and weekday names come from fixed tables rather than the runtime's
locale, so labels are identical on every machine.
"""

from datetime import date, time
from typing import List, Optional, Union

from eventlink.config.constants import MONTH_ABBREVIATIONS, WEEKDAY_ABBREVIATIONS
from eventlink.core.time_utils import parse_date, parse_time

PLACEHOLDER_DATETIME = "Select Date & Time"


def generate_time_options(step_minutes: int = 15) -> List[str]:
    """All HH:MM values of a day in `step_minutes` increments."""
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")
    return [
        f"{minute // 60:02d}:{minute % 60:02d}"
        for minute in range(0, 24 * 60, step_minutes)
    ]


def format_time_display(value: Union[time, str, None]) -> str:
    """Format a time of day as a 12-hour label, e.g. "13:05" -> "1:05 PM".

    Returns an empty string for empty input.
    """
    if not value:
        return ""
    clock = parse_time(value)
    suffix = "PM" if clock.hour >= 12 else "AM"
    hour = clock.hour % 12 or 12
    return f"{hour}:{clock.minute:02d} {suffix}"


def format_date_display(value: Union[date, str]) -> str:
    """Format a date as a short label, e.g. 2025-01-01 -> "Wed, Jan 1"."""
    day = parse_date(value)
    weekday = WEEKDAY_ABBREVIATIONS[day.weekday()]
    month = MONTH_ABBREVIATIONS[day.month - 1]
    return f"{weekday}, {month} {day.day}"


def format_datetime_display(
    day: Union[date, str, None],
    clock: Union[time, str, None],
    timezone: Optional[str] = None,
) -> str:
    """Format the summary line shown on an event card.

    >>> format_datetime_display("2025-01-01", "09:00", "UTC")
    'Wed, Jan 1 • 9:00 AM (UTC)'
    """
    if not day or not clock:
        return PLACEHOLDER_DATETIME
    label = f"{format_date_display(day)} • {format_time_display(clock)}"
    if timezone:
        label += f" ({timezone})"
    return label
