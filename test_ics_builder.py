import dataclasses
from datetime import datetime, timedelta

import pytest
import pytz
from icalendar import Calendar

from eventlink.config.settings import ExportConfig
from eventlink.core.event_model import EventRecord
from eventlink.core.ics_builder import (
    build_calendar_file,
    build_ics,
    format_alarm_trigger,
    ics_filename,
)
from eventlink.core.recurrence import RecurrenceRule

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=pytz.utc)


def _lines(content: str):
    return content.rstrip("\r\n").split("\r\n")


def test_document_structure(sample_event: EventRecord) -> None:
    lines = _lines(build_ics(sample_event, now=NOW))

    assert lines[:6] == [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Universal Event Link Generator//EN",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        "BEGIN:VEVENT",
    ]
    assert lines[-3:] == ["END:VALARM", "END:VEVENT", "END:VCALENDAR"]
    assert "DTSTAMP:20250101T120000Z" in lines
    assert "DTSTART;TZID=America/New_York:20250101T090000" in lines
    assert "DTEND;TZID=America/New_York:20250101T103000" in lines
    assert "SUMMARY:Team Sync & Review" in lines
    assert "LOCATION:Room 1\\, HQ" in lines
    assert "STATUS:CONFIRMED" in lines
    assert "TRIGGER:-PT1H" in lines
    assert not any(line.startswith("RRULE") for line in lines)


def test_uid_combines_stamp_and_random_suffix(sample_event: EventRecord) -> None:
    uids = set()
    for _ in range(5):
        uid_line = next(line for line in _lines(build_ics(sample_event, now=NOW)) if line.startswith("UID:"))
        uid = uid_line[len("UID:"):]
        stamp, rest = uid.split("-", 1)
        suffix, domain = rest.split("@")
        assert stamp == "20250101T120000Z"
        assert len(suffix) == 7
        assert domain == "universal-link-gen.com"
        uids.add(uid)

    assert len(uids) == 5


def test_uid_domain_from_config(sample_event: EventRecord) -> None:
    content = build_ics(sample_event, now=NOW, config=ExportConfig(uid_domain="events.example.org"))

    assert "@events.example.org" in content


def test_naive_now_is_treated_as_utc(sample_event: EventRecord) -> None:
    content = build_ics(sample_event, now=datetime(2025, 1, 1, 12, 0, 0))

    assert "DTSTAMP:20250101T120000Z" in _lines(content)


def test_recurrence_line(sample_event: EventRecord, weekly_rule: RecurrenceRule) -> None:
    lines = _lines(build_ics(dataclasses.replace(sample_event, recurrence=weekly_rule), now=NOW))

    assert "RRULE:FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE;COUNT=5" in lines
    assert lines.index("RRULE:FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE;COUNT=5") < lines.index("BEGIN:VALARM")


@pytest.mark.parametrize("minutes,expected", [
    (60, "-PT1H"),
    (45, "-PT45M"),
    (1440, "-PT24H"),
    (90, "-PT90M"),
    (15, "-PT15M"),
    (0, "-PT0M"),
])
def test_alarm_trigger(minutes: int, expected: str) -> None:
    assert format_alarm_trigger(minutes) == expected


def test_text_is_escaped_once(sample_event: EventRecord) -> None:
    text = "a,b;c\nd\\e"
    content = build_ics(dataclasses.replace(sample_event, title=text), now=NOW)

    assert "SUMMARY:a\\,b\\;c\\nd\\\\e" in _lines(content)
    vevent = Calendar.from_ical(content.encode("utf-8")).walk("VEVENT")[0]
    assert str(vevent["SUMMARY"]) == text


def test_carriage_returns_become_newlines(sample_event: EventRecord) -> None:
    event = dataclasses.replace(sample_event, description="one\r\ntwo\rthree", location="")
    lines = _lines(build_ics(event, now=NOW))

    assert "DESCRIPTION:one\\ntwo\\nthree" in lines
    assert "LOCATION:" in lines


@pytest.mark.parametrize("minutes,expected", [(1440, "-PT24H"), (90, "-PT90M"), (0, "-PT0M")])
def test_alarm_trigger_written_verbatim(sample_event: EventRecord, minutes: int, expected: str) -> None:
    lines = _lines(build_ics(dataclasses.replace(sample_event, reminder_minutes=minutes), now=NOW))

    assert f"TRIGGER:{expected}" in lines


def test_floating_times_without_timezone_label(sample_event: EventRecord) -> None:
    lines = _lines(build_ics(dataclasses.replace(sample_event, timezone=""), now=NOW))

    assert "DTSTART:20250101T090000" in lines
    assert "DTEND:20250101T103000" in lines


def test_parses_with_icalendar(sample_event: EventRecord, weekly_rule: RecurrenceRule) -> None:
    event = dataclasses.replace(
        sample_event,
        description="Line one, with comma; and semicolon\nLine two",
        recurrence=weekly_rule,
    )
    calendar = Calendar.from_ical(build_ics(event, now=NOW).encode("utf-8"))
    vevent = calendar.walk("VEVENT")[0]

    assert str(vevent["SUMMARY"]) == "Team Sync & Review"
    assert str(vevent["DESCRIPTION"]) == "Line one, with comma; and semicolon\nLine two"
    assert str(vevent["LOCATION"]) == "Room 1, HQ"
    assert vevent["RRULE"]["FREQ"] == ["WEEKLY"]
    assert vevent["RRULE"]["BYDAY"] == ["MO", "WE"]

    alarm = vevent.walk("VALARM")[0]
    assert alarm["TRIGGER"].dt == timedelta(hours=-1)


def test_long_lines_are_folded(sample_event: EventRecord) -> None:
    description = " ".join(f"Agenda item {i}." for i in range(30))
    content = build_ics(dataclasses.replace(sample_event, description=description), now=NOW)

    assert all(len(line.encode("utf-8")) <= 75 for line in _lines(content))
    vevent = Calendar.from_ical(content.encode("utf-8")).walk("VEVENT")[0]
    assert str(vevent["DESCRIPTION"]) == description


def test_ics_filename() -> None:
    assert ics_filename("Team Sync  Review") == "Team_Sync_Review.ics"
    assert ics_filename("Tab\tand\nnewline") == "Tab_and_newline.ics"
    assert ics_filename("") == "event.ics"


def test_build_calendar_file(sample_event: EventRecord) -> None:
    calendar_file = build_calendar_file(sample_event, now=NOW)

    assert calendar_file.filename == "Team_Sync_&_Review.ics"
    assert calendar_file.mime_type == "text/calendar;charset=utf-8"
    assert calendar_file.to_bytes().startswith(b"BEGIN:VCALENDAR\r\n")
