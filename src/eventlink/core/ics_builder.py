"""Calendar file (.ics) generation for a single shareable event."""

import logging
import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pytz
from icalendar import Alarm, Calendar, Event, vDatetime, vText
from icalendar.prop import vInline

from eventlink.config.constants import (
    DEFAULT_EVENT_TITLE,
    ICS_CALSCALE,
    ICS_EXTENSION,
    ICS_METHOD,
    ICS_MIME_TYPE,
    ICS_STATUS,
    ICS_UID_SUFFIX_LENGTH,
    ICS_VERSION,
)
from eventlink.config.settings import EXPORT_CONFIG, ExportConfig
from eventlink.core.event_model import EventRecord
from eventlink.core.recurrence import build_rrule
from eventlink.core.time_utils import combine

logger = logging.getLogger(__name__)

# Control characters are dropped from the TZID parameter
_PARAM_UNSAFE = re.compile(r"[\x00-\x1f\x7f]")


@dataclass(frozen=True)
class CalendarFile:
    """A downloadable calendar file."""
    filename: str
    content: str
    mime_type: str = ICS_MIME_TYPE

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")


def format_alarm_trigger(reminder_minutes: int) -> str:
    """Alarm trigger relative to the start, e.g. 60 -> "-PT1H", 45 -> "-PT45M".

    Whole hours are written in hours (1440 -> "-PT24H"); anything else stays
    in minutes (90 -> "-PT90M").
    """
    if reminder_minutes > 0 and reminder_minutes % 60 == 0:
        return f"-PT{reminder_minutes // 60}H"
    return f"-PT{reminder_minutes}M"


def ics_filename(title: Optional[str]) -> str:
    """Download filename: the title with whitespace runs turned into underscores."""
    return re.sub(r"\s+", "_", title or DEFAULT_EVENT_TITLE) + ICS_EXTENSION


def _text(value: Optional[str]) -> vText:
    """TEXT property value; lone carriage returns count as newlines."""
    return vText((value or "").replace("\r\n", "\n").replace("\r", "\n"))


def _utc_now(now: Optional[datetime]) -> datetime:
    moment = now or datetime.now(pytz.utc)
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return moment.astimezone(pytz.utc).replace(microsecond=0)


def _make_uid(stamp: datetime, config: ExportConfig) -> str:
    suffix = uuid.uuid4().hex[:ICS_UID_SUFFIX_LENGTH]
    return f"{vDatetime(stamp).to_ical().decode('ascii')}-{suffix}@{config.uid_domain}"


def _create_ics_calendar(config: ExportConfig) -> Calendar:
    """Create a new ICS calendar with standard headers.

    Returns:
        A new Calendar object with required headers.
    """
    cal = Calendar()
    cal.add("VERSION", ICS_VERSION)
    cal.add("PRODID", config.prodid)
    cal.add("CALSCALE", ICS_CALSCALE)
    cal.add("METHOD", ICS_METHOD)
    return cal


def _create_ics_alarm(event: EventRecord, config: ExportConfig) -> Alarm:
    """Create the display reminder for an event."""
    alarm = Alarm()
    alarm.add("ACTION", "DISPLAY")
    alarm.add("DESCRIPTION", _text(config.reminder_description))
    # Written as-is: a timedelta would render 1440 minutes as -P1D
    alarm["TRIGGER"] = vInline(format_alarm_trigger(event.reminder_minutes))
    return alarm


def _create_ics_event(event: EventRecord, stamp: datetime, config: ExportConfig) -> Event:
    """Create an ICS event component.

    Start and end are naive wall-clock datetimes tagged with the event's
    TZID label; nothing is converted.
    """
    ve = Event()
    ve.add("UID", _make_uid(stamp, config))
    ve.add("DTSTAMP", stamp)

    tzid = _PARAM_UNSAFE.sub("", event.timezone or "")
    parameters = {"TZID": tzid} if tzid else None
    ve.add("DTSTART", combine(event.start_date, event.start_time), parameters=parameters)
    ve.add("DTEND", combine(event.end_date, event.end_time), parameters=parameters)

    ve.add("SUMMARY", _text(event.title))
    ve.add("DESCRIPTION", _text(event.description))
    ve.add("LOCATION", _text(event.location))
    ve.add("STATUS", ICS_STATUS)
    ve.add("SEQUENCE", 0)

    if event.recurrence:
        # vRecur would reorder the parts; keep the rule string verbatim
        ve["RRULE"] = vInline(build_rrule(event.recurrence))

    ve.add_component(_create_ics_alarm(event, config))
    return ve


def _format_ics_output(cal: Calendar) -> str:
    """Format calendar to ICS string with proper line endings.

    Args:
        cal: The Calendar object to format.

    Returns:
        ICS content string with CRLF line endings.
    """
    raw_ical = cal.to_ical(sorted=False)
    decoded_ical = raw_ical.decode("utf-8", errors="replace")
    # Ensure CRLF line endings per RFC5545
    return decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")


def build_ics(
    event: EventRecord,
    now: Optional[datetime] = None,
    config: ExportConfig = EXPORT_CONFIG,
) -> str:
    """Build the .ics content for one event.

    The UID combines the generation stamp and a random suffix. Title,
    description and location are escaped by icalendar's TEXT rules.

    Args:
        event: The event to export.
        now: Generation time (defaults to the current UTC time).
        config: Export settings (PRODID, UID domain).

    Returns:
        ICS content string with CRLF line endings.
    """
    cal = _create_ics_calendar(config)
    cal.add_component(_create_ics_event(event, _utc_now(now), config))

    logger.debug("Built calendar file for '%s'", event.title)
    return _format_ics_output(cal)


def build_calendar_file(
    event: EventRecord,
    now: Optional[datetime] = None,
    config: ExportConfig = EXPORT_CONFIG,
) -> CalendarFile:
    """Build the downloadable calendar file (name, MIME type and content)."""
    return CalendarFile(
        filename=ics_filename(event.title),
        content=build_ics(event, now=now, config=config),
    )
