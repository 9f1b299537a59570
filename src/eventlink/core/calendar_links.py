"""Generate 'Add to calendar' deep links for Google, Yahoo and Outlook.

Wall-clock values are passed through untouched; where a provider accepts a
timezone it gets the record's label as its own parameter. Outlook's compose
link has no recurrence support, so recurring events appear there as a single
occurrence.
"""

import logging
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode

from eventlink.config.constants import (
    GOOGLE_CALENDAR_URL,
    GOOGLE_RECUR_PREFIX,
    OUTLOOK_CALENDAR_URL,
    URI_COMPONENT_SAFE,
    YAHOO_CALENDAR_URL,
)
from eventlink.core.event_model import EventRecord
from eventlink.core.recurrence import build_rrule
from eventlink.core.time_utils import (
    duration_minutes,
    format_calendar_datetime,
    format_duration,
    format_iso_datetime,
)

logger = logging.getLogger(__name__)

Params = List[Tuple[str, str]]


def _build_url(base: str, params: Params) -> str:
    return f"{base}?{urlencode(params, safe=URI_COMPONENT_SAFE, quote_via=quote)}"


def _rrule_for(event: EventRecord) -> Optional[str]:
    return build_rrule(event.recurrence) if event.recurrence else None


def google_calendar_url(event: EventRecord) -> str:
    """Generate a Google Calendar 'create event' link.

    Opens https://calendar.google.com/calendar/render with pre-filled fields,
    including the recurrence rule as recur=RRULE:...
    """
    start = format_calendar_datetime(event.start_date, event.start_time)
    end = format_calendar_datetime(event.end_date, event.end_time)
    params: Params = [
        ("action", "TEMPLATE"),
        ("text", event.title),
        ("dates", f"{start}/{end}"),
        ("details", event.description),
        ("location", event.location),
        ("ctz", event.timezone),
    ]
    rrule = _rrule_for(event)
    if rrule:
        params.append(("recur", GOOGLE_RECUR_PREFIX + rrule))
    return _build_url(GOOGLE_CALENDAR_URL, params)


def yahoo_calendar_url(event: EventRecord) -> str:
    """Generate a Yahoo Calendar link.

    Yahoo takes a start stamp plus an HHMM duration instead of an end time.
    """
    params: Params = [
        ("v", "60"),
        ("view", "d"),
        ("type", "20"),
        ("title", event.title),
        ("st", format_calendar_datetime(event.start_date, event.start_time)),
        ("dur", format_duration(duration_minutes(event))),
        ("desc", event.description),
        ("in_loc", event.location),
    ]
    rrule = _rrule_for(event)
    if rrule:
        params.append(("rrule", rrule))
    return _build_url(YAHOO_CALENDAR_URL, params)


def outlook_calendar_url(event: EventRecord) -> str:
    """Generate an Outlook on the web compose link.

    Recurrence is omitted even when the event has one.
    """
    if event.recurrence:
        logger.debug("Outlook link for '%s' omits its recurrence", event.title)
    params: Params = [
        ("path", "/calendar/action/compose"),
        ("rru", "addevent"),
        ("subject", event.title),
        ("startdt", format_iso_datetime(event.start_date, event.start_time)),
        ("enddt", format_iso_datetime(event.end_date, event.end_time)),
        ("body", event.description),
        ("location", event.location),
    ]
    return _build_url(OUTLOOK_CALENDAR_URL, params)


def calendar_links(event: EventRecord) -> Dict[str, str]:
    """Return all provider links for an event."""
    return {
        "google": google_calendar_url(event),
        "yahoo": yahoo_calendar_url(event),
        "outlook": outlook_calendar_url(event),
    }


def supports_recurrence(provider: str) -> bool:
    """Whether a provider's link carries the event's recurrence."""
    return provider in ("google", "yahoo")
