"""Wall-clock date/time arithmetic shared by the codec and the exporters."""

import re
from datetime import date, datetime, time, timedelta
from typing import Tuple, Union

from dateutil import parser as dateutil_parser

from eventlink.config.constants import DEFAULT_DURATION_MINUTES

DateLike = Union[date, str]
TimeLike = Union[time, str]

# Wire forms: YYYY-MM-DD and HH:MM (an optional :SS is ignored)
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def parse_date(value: DateLike) -> date:
    """Parse a YYYY-MM-DD string (or pass a date through).

    Raises:
        ValueError: If the value is not an ISO calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.match(value.strip()):
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD")
    return dateutil_parser.isoparse(value.strip()).date()


def parse_time(value: TimeLike) -> time:
    """Parse an HH:MM string (or pass a time through) at minute resolution.

    Raises:
        ValueError: If the value is not a time of day.
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0, tzinfo=None)
    match = _TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"invalid time {value!r}, expected HH:MM")
    return time(int(match.group(1)), int(match.group(2)))


def combine(day: DateLike, clock: TimeLike) -> datetime:
    """Build a naive local instant from a date and a time of day."""
    return datetime.combine(parse_date(day), parse_time(clock))


def split(instant: datetime) -> Tuple[date, time]:
    """Split a naive instant back into date and minute-resolution time."""
    return instant.date(), instant.time().replace(second=0, microsecond=0)


def default_end(start_date: DateLike, start_time: TimeLike) -> Tuple[date, time]:
    """Return the end date and time one hour after the start.

    Crossing midnight rolls the date forward, so 23:30 ends at 00:30 the
    next day.
    """
    end = combine(start_date, start_time) + timedelta(minutes=DEFAULT_DURATION_MINUTES)
    return split(end)


def duration_minutes(record) -> int:
    """Whole minutes from the record's start to its end (may be negative)."""
    start = combine(record.start_date, record.start_time)
    end = combine(record.end_date, record.end_time)
    return int((end - start).total_seconds() // 60)


def format_duration(minutes: int) -> str:
    """Format minutes as zero-padded HHMM, e.g. 90 -> "0130".

    Negative input is not special-cased.
    """
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours:02d}{mins:02d}"


def format_calendar_datetime(day: DateLike, clock: TimeLike) -> str:
    """Compact wall-clock stamp, e.g. 2025-01-01 09:30 -> "20250101T093000"."""
    return combine(day, clock).strftime("%Y%m%dT%H%M%S")


def format_iso_datetime(day: DateLike, clock: TimeLike) -> str:
    """Full wall-clock stamp, e.g. "2025-01-01T09:30:00"."""
    return combine(day, clock).strftime("%Y-%m-%dT%H:%M:%S")


def format_date(day: date) -> str:
    """YYYY-MM-DD."""
    return day.strftime("%Y-%m-%d")


def format_time(clock: time) -> str:
    """HH:MM."""
    return clock.strftime("%H:%M")
