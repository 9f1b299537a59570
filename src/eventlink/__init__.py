"""
eventlink - Shareable Calendar Event Links

Encodes an event into a URL-safe token for share links and exports it as an
.ics file or Google, Yahoo and Outlook "add to calendar" links.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from eventlink.config.settings import CODEC_CONFIG, EXPORT_CONFIG
from eventlink.exceptions.errors import (
    EventDecodeError,
    EventLinkError,
    EventValidationError,
    RecurrenceValidationError,
)
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
from eventlink.core.codec import DecodeResult, decode_event, encode_event
from eventlink.core.calendar_links import calendar_links
from eventlink.core.ics_builder import build_calendar_file, build_ics
from eventlink.core.share import build_share_url, load_shared_event

__all__ = [
    # Version
    "__version__",
    # Config
    "CODEC_CONFIG",
    "EXPORT_CONFIG",
    # Exceptions
    "EventDecodeError",
    "EventLinkError",
    "EventValidationError",
    "RecurrenceValidationError",
    # Core
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
    "calendar_links",
    "build_calendar_file",
    "build_ics",
    "build_share_url",
    "load_shared_event",
]
