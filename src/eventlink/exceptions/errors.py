"""Exception hierarchy for eventlink."""

from typing import Iterable, Optional


class EventLinkError(Exception):
    """Base class for all eventlink errors."""


class EventValidationError(EventLinkError):
    """Raised when a wire-form event dictionary cannot be turned into a record."""

    def __init__(
        self,
        message: Optional[str] = None,
        missing_fields: Optional[Iterable[str]] = None,
        event_title: Optional[str] = None,
    ):
        self.missing_fields = set(missing_fields or ())
        self.event_title = event_title
        if message is None:
            fields = ", ".join(sorted(self.missing_fields))
            message = f"Event '{event_title or 'Unknown'}' is missing required fields: {fields}"
        super().__init__(message)


class RecurrenceValidationError(EventLinkError):
    """Raised when a recurrence rule is constructed with impossible values."""


class EventDecodeError(EventLinkError):
    """Raised by a decoding stage when a share token is malformed."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        super().__init__(f"{stage}: {message}")
