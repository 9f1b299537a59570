from datetime import date

import pytest

from eventlink.core.recurrence import (
    EndsAfter,
    EndsNever,
    EndsOn,
    Frequency,
    RecurrenceRule,
    WeekDay,
    build_rrule,
    whole_number,
)
from eventlink.exceptions import RecurrenceValidationError


def test_weekly_rule_with_interval_days_and_count(weekly_rule: RecurrenceRule) -> None:
    assert build_rrule(weekly_rule) == "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE;COUNT=5"


def test_daily_rule_until_end_of_day_utc() -> None:
    rule = RecurrenceRule(Frequency.DAILY, interval=1, ends=EndsOn(date(2025, 12, 31)))

    assert build_rrule(rule) == "FREQ=DAILY;UNTIL=20251231T235959Z"


def test_never_ending_rule_has_no_termination() -> None:
    assert build_rrule(RecurrenceRule(Frequency.YEARLY)) == "FREQ=YEARLY"


def test_byday_keeps_stored_order() -> None:
    rule = RecurrenceRule(Frequency.WEEKLY, week_days=(WeekDay.FR, WeekDay.MO))

    assert build_rrule(rule) == "FREQ=WEEKLY;BYDAY=FR,MO"


def test_byday_only_for_weekly_rules() -> None:
    rule = RecurrenceRule(Frequency.MONTHLY, interval=3, week_days=(WeekDay.TU,))

    assert build_rrule(rule) == "FREQ=MONTHLY;INTERVAL=3"


def test_weekly_without_days_omits_byday() -> None:
    assert build_rrule(RecurrenceRule(Frequency.WEEKLY)) == "FREQ=WEEKLY"


def test_strings_are_coerced_to_enums() -> None:
    rule = RecurrenceRule("weekly", week_days=("mo", "th"))

    assert rule.frequency is Frequency.WEEKLY
    assert rule.week_days == (WeekDay.MO, WeekDay.TH)


@pytest.mark.parametrize("interval", [0, -1, True, "2"])
def test_invalid_interval_is_rejected(interval) -> None:
    with pytest.raises(RecurrenceValidationError):
        RecurrenceRule(Frequency.DAILY, interval=interval)


def test_unknown_frequency_is_rejected() -> None:
    with pytest.raises(RecurrenceValidationError):
        RecurrenceRule("HOURLY")


def test_non_positive_count_is_rejected() -> None:
    with pytest.raises(RecurrenceValidationError):
        EndsAfter(0)


def test_wire_round_trip(weekly_rule: RecurrenceRule) -> None:
    wire = weekly_rule.to_dict()

    assert wire == {
        "frequency": "WEEKLY",
        "interval": 2,
        "ends": "after",
        "endDate": None,
        "count": 5,
        "weekDays": ["MO", "WE"],
    }
    assert RecurrenceRule.from_dict(wire) == weekly_rule


def test_from_dict_reads_until_date() -> None:
    rule = RecurrenceRule.from_dict({
        "frequency": "DAILY",
        "interval": 1,
        "ends": "on",
        "endDate": "2025-12-31",
        "count": None,
        "weekDays": [],
    })

    assert rule.ends == EndsOn(date(2025, 12, 31))


@pytest.mark.parametrize("wire_ends", [
    {"ends": "after", "count": None, "endDate": "2025-12-31"},
    {"ends": "after", "count": 0},
    {"ends": "on", "endDate": None, "count": 3},
    {"ends": "never", "endDate": "2025-12-31", "count": 3},
])
def test_loose_wire_termination_never_emits_both(wire_ends) -> None:
    rule = RecurrenceRule.from_dict({"frequency": "DAILY", **wire_ends})

    assert rule.ends == EndsNever()
    assert build_rrule(rule) == "FREQ=DAILY"


def test_from_dict_rejects_unknown_end_condition() -> None:
    with pytest.raises(RecurrenceValidationError):
        RecurrenceRule.from_dict({"frequency": "DAILY", "ends": "sometimes"})


@pytest.mark.parametrize("value,expected", [(3, 3), (3.0, 3), (-2, -2)])
def test_whole_number_accepts_integral_values(value, expected: int) -> None:
    assert whole_number(value) == expected


@pytest.mark.parametrize("value", [True, 2.5, float("inf"), float("-inf"), float("nan"), "3", None])
def test_whole_number_rejects_other_values(value) -> None:
    with pytest.raises(ValueError):
        whole_number(value)


def test_infinite_count_degrades_to_never() -> None:
    rule = RecurrenceRule.from_dict({"frequency": "DAILY", "interval": 1, "ends": "after", "count": float("inf")})

    assert rule.ends == EndsNever()
