from datetime import date, time

import pytest

from eventlink.core.event_model import EventRecord
from eventlink.core.recurrence import EndsAfter, Frequency, RecurrenceRule, WeekDay


@pytest.fixture
def sample_event() -> EventRecord:
    return EventRecord(
        title="Team Sync & Review",
        start_date=date(2025, 1, 1),
        start_time=time(9, 0),
        end_date=date(2025, 1, 1),
        end_time=time(10, 30),
        timezone="America/New_York",
        location="Room 1, HQ",
        description="Agenda: roadmap; hiring\nBring laptops",
        reminder_minutes=60,
    )


@pytest.fixture
def weekly_rule() -> RecurrenceRule:
    return RecurrenceRule(
        frequency=Frequency.WEEKLY,
        interval=2,
        week_days=(WeekDay.MO, WeekDay.WE),
        ends=EndsAfter(5),
    )
