"""Recurrence rules and their RRULE projection.

Only the practical subset FREQ, INTERVAL, BYDAY, COUNT and UNTIL is ever
produced. The same rule string feeds the calendar file and the two link
providers that accept raw recurrence grammar.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Dict, Optional, Sequence, Tuple, Union

from eventlink.core.time_utils import format_date, parse_date
from eventlink.exceptions.errors import RecurrenceValidationError

logger = logging.getLogger(__name__)


class Frequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class WeekDay(str, Enum):
    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"
    SU = "SU"


@dataclass(frozen=True)
class EndsNever:
    """The rule repeats forever."""

    tag: ClassVar[str] = "never"


@dataclass(frozen=True)
class EndsOn:
    """The rule stops after the given date (inclusive)."""

    end_date: date
    tag: ClassVar[str] = "on"

    def __post_init__(self):
        object.__setattr__(self, "end_date", parse_date(self.end_date))


@dataclass(frozen=True)
class EndsAfter:
    """The rule stops after a number of occurrences."""

    count: int
    tag: ClassVar[str] = "after"

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise RecurrenceValidationError(
                f"Occurrence count must be a positive integer, got {self.count!r}"
            )


Ends = Union[EndsNever, EndsOn, EndsAfter]


def whole_number(value) -> int:
    """Return a JSON number as an int, rejecting fractions, NaN and infinities.

    Raises:
        ValueError: If the value is not a finite whole number.
    """
    if isinstance(value, bool):
        raise ValueError(f"expected a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise ValueError(f"expected a whole number, got {value!r}")


@dataclass(frozen=True)
class RecurrenceRule:
    """One recurrence: every `interval` units of `frequency` until `ends`."""

    frequency: Frequency
    interval: int = 1
    week_days: Tuple[WeekDay, ...] = ()
    ends: Ends = field(default_factory=EndsNever)

    def __post_init__(self):
        try:
            frequency = Frequency(str(getattr(self.frequency, "value", self.frequency)).upper())
            week_days = tuple(
                WeekDay(str(getattr(day, "value", day)).upper()) for day in self.week_days
            )
        except ValueError as exc:
            raise RecurrenceValidationError(str(exc)) from exc
        if isinstance(self.interval, bool) or not isinstance(self.interval, int) or self.interval < 1:
            raise RecurrenceValidationError(
                f"Interval must be a positive integer, got {self.interval!r}"
            )
        if not isinstance(self.ends, (EndsNever, EndsOn, EndsAfter)):
            raise RecurrenceValidationError(f"Unsupported end condition: {self.ends!r}")
        object.__setattr__(self, "frequency", frequency)
        object.__setattr__(self, "week_days", week_days)

    def to_dict(self) -> Dict:
        """Convert to the wire form shared with the browser implementation."""
        return {
            "frequency": self.frequency.value,
            "interval": self.interval,
            "ends": self.ends.tag,
            "endDate": format_date(self.ends.end_date) if isinstance(self.ends, EndsOn) else None,
            "count": self.ends.count if isinstance(self.ends, EndsAfter) else None,
            "weekDays": [day.value for day in self.week_days],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "RecurrenceRule":
        """Create a rule from its wire form.

        The wire form keeps `ends`, `endDate` and `count` side by side; an
        `after` rule without a usable count, or an `on` rule without a date,
        becomes a never-ending rule.

        Raises:
            RecurrenceValidationError: If frequency, interval or week days are invalid.
        """
        if not isinstance(data, dict):
            raise RecurrenceValidationError(f"Expected a recurrence object, got {type(data).__name__}")
        try:
            interval = whole_number(data.get("interval") or 1)
        except ValueError as exc:
            raise RecurrenceValidationError(f"Invalid interval: {data.get('interval')!r}") from exc
        week_days = data.get("weekDays") or ()
        if isinstance(week_days, str) or not isinstance(week_days, Sequence):
            raise RecurrenceValidationError(f"Invalid week days: {week_days!r}")
        return cls(
            frequency=data.get("frequency"),
            interval=interval,
            week_days=tuple(week_days),
            ends=_ends_from_wire(data.get("ends"), data.get("endDate"), data.get("count")),
        )


def _ends_from_wire(tag: Optional[str], end_date, count) -> Ends:
    if tag == EndsAfter.tag and count is not None:
        try:
            occurrences = whole_number(count)
        except ValueError:
            occurrences = 0
        if occurrences > 0:
            return EndsAfter(occurrences)
    if tag == EndsOn.tag and end_date:
        try:
            return EndsOn(parse_date(end_date))
        except ValueError as exc:
            raise RecurrenceValidationError(f"Invalid end date: {end_date!r}") from exc
    if tag not in (None, EndsNever.tag, EndsOn.tag, EndsAfter.tag):
        raise RecurrenceValidationError(f"Unknown end condition: {tag!r}")
    if tag != EndsNever.tag and tag is not None:
        logger.debug("Recurrence ends=%s without its value, treating as never", tag)
    return EndsNever()


def build_rrule(rule: RecurrenceRule) -> str:
    """Project a rule into an RRULE value string (without the "RRULE:" prefix).

    Parts appear in a fixed order and only when meaningful:
    FREQ, INTERVAL (>1), BYDAY (weekly with days), then COUNT or UNTIL.

    >>> build_rrule(RecurrenceRule(Frequency.WEEKLY, 2, (WeekDay.MO, WeekDay.WE), EndsAfter(5)))
    'FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE;COUNT=5'
    """
    parts = [f"FREQ={rule.frequency.value}"]
    if rule.interval > 1:
        parts.append(f"INTERVAL={rule.interval}")
    if rule.frequency is Frequency.WEEKLY and rule.week_days:
        parts.append("BYDAY=" + ",".join(day.value for day in rule.week_days))
    if isinstance(rule.ends, EndsAfter):
        parts.append(f"COUNT={rule.ends.count}")
    elif isinstance(rule.ends, EndsOn):
        # End of day, always Z-suffixed: the event's zone label is not applied
        parts.append(f"UNTIL={rule.ends.end_date.strftime('%Y%m%d')}T235959Z")
    return ";".join(parts)
