"""Event data model for shareable calendar events."""

from dataclasses import dataclass
from datetime import date, time
from typing import Dict, Optional, Set

from eventlink.config.constants import (
    DEFAULT_REMINDER_MINUTES,
    DEFAULT_START_TIME,
    DEFAULT_TIMEZONE,
    EMBEDDED_IMAGE_PREFIX,
)
from eventlink.core.recurrence import RecurrenceRule, whole_number
from eventlink.core.time_utils import (
    default_end,
    format_date,
    format_time,
    parse_date,
    parse_time,
)
from eventlink.core.timezone_utils import local_timezone_name
from eventlink.exceptions.errors import EventValidationError, RecurrenceValidationError


def _text_field(data: Dict, key: str, default: Optional[str]) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{key} must be text, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class EventRecord:
    """Type-safe, immutable representation of one event.

    Times are wall-clock values; `timezone` is a label carried alongside
    them and is never used to convert them.
    """

    title: str
    start_date: date
    start_time: time
    end_date: date
    end_time: time
    timezone: str = DEFAULT_TIMEZONE
    location: str = ""
    description: str = ""
    reminder_minutes: int = DEFAULT_REMINDER_MINUTES
    image_url: Optional[str] = None
    recurrence: Optional[RecurrenceRule] = None

    # Required fields of the wire form
    REQUIRED_FIELDS = frozenset({
        "title", "startDate", "startTime", "endDate", "endTime"
    })

    @property
    def has_embedded_image(self) -> bool:
        """True when the image is an inline data payload rather than a remote URL."""
        return bool(self.image_url) and self.image_url.startswith(EMBEDDED_IMAGE_PREFIX)

    @classmethod
    def from_dict(cls, data: Dict) -> "EventRecord":
        """Create an EventRecord from its wire-form dictionary.

        Args:
            data: Dictionary using the camelCase wire keys.

        Returns:
            A validated EventRecord instance.

        Raises:
            EventValidationError: If required fields are missing or malformed.
        """
        if not isinstance(data, dict):
            raise EventValidationError(f"Expected an event object, got {type(data).__name__}")

        missing: Set[str] = set(cls.REQUIRED_FIELDS - set(data.keys()))
        if missing:
            raise EventValidationError(
                missing_fields=missing,
                event_title=data.get("title", "Unknown"),
            )

        title = data["title"]
        try:
            reminder = whole_number(data.get("reminderMinutes", DEFAULT_REMINDER_MINUTES))
            recurrence = data.get("recurrence")
            return cls(
                title=_text_field(data, "title", ""),
                start_date=parse_date(data["startDate"]),
                start_time=parse_time(data["startTime"]),
                end_date=parse_date(data["endDate"]),
                end_time=parse_time(data["endTime"]),
                timezone=_text_field(data, "timezone", DEFAULT_TIMEZONE),
                location=_text_field(data, "location", ""),
                description=_text_field(data, "description", ""),
                reminder_minutes=max(reminder, 0),
                image_url=_text_field(data, "imageUrl", None) or None,
                recurrence=RecurrenceRule.from_dict(recurrence) if recurrence else None,
            )
        except (TypeError, ValueError, RecurrenceValidationError) as exc:
            raise EventValidationError(f"Invalid event '{title}': {exc}") from exc

    def to_dict(self) -> Dict:
        """Convert to the wire-form dictionary.

        Returns:
            Dictionary representation of the event.
        """
        return {
            "title": self.title,
            "startDate": format_date(self.start_date),
            "startTime": format_time(self.start_time),
            "endDate": format_date(self.end_date),
            "endTime": format_time(self.end_time),
            "timezone": self.timezone,
            "location": self.location,
            "description": self.description,
            "reminderMinutes": self.reminder_minutes,
            "imageUrl": self.image_url,
            "recurrence": self.recurrence.to_dict() if self.recurrence else None,
        }


def default_event(today: Optional[date] = None, timezone: Optional[str] = None) -> EventRecord:
    """Blank event used for a fresh form or when a share link can't be read."""
    start_date = today or date.today()
    start_time = parse_time(DEFAULT_START_TIME)
    end_date, end_time = default_end(start_date, start_time)
    return EventRecord(
        title="",
        start_date=start_date,
        start_time=start_time,
        end_date=end_date,
        end_time=end_time,
        timezone=timezone or local_timezone_name(),
    )
