"""Core event codec and calendar export logic for eventlink."""

from eventlink.core.event_model import EventRecord, default_event
from eventlink.core.recurrence import (
    EndsAfter,
    EndsNever,
    EndsOn,
    Frequency,
    RecurrenceRule,
    WeekDay,
    build_rrule,
)
from eventlink.core.codec import DecodeResult, decode_event, encode_event, header_image_url
from eventlink.core.calendar_links import (
    calendar_links,
    google_calendar_url,
    outlook_calendar_url,
    yahoo_calendar_url,
)
from eventlink.core.ics_builder import CalendarFile, build_calendar_file, build_ics
from eventlink.core.share import build_share_url, load_shared_event, shorten_or_fallback

__all__ = [
    "EventRecord",
    "default_event",
    "EndsAfter",
    "EndsNever",
    "EndsOn",
    "Frequency",
    "RecurrenceRule",
    "WeekDay",
    "build_rrule",
    "DecodeResult",
    "decode_event",
    "encode_event",
    "header_image_url",
    "calendar_links",
    "google_calendar_url",
    "outlook_calendar_url",
    "yahoo_calendar_url",
    "CalendarFile",
    "build_calendar_file",
    "build_ics",
    "build_share_url",
    "load_shared_event",
    "shorten_or_fallback",
]
