"""Custom exceptions for eventlink."""

from eventlink.exceptions.errors import (
    EventLinkError,
    EventValidationError,
    RecurrenceValidationError,
    EventDecodeError,
)

__all__ = [
    "EventLinkError",
    "EventValidationError",
    "RecurrenceValidationError",
    "EventDecodeError",
]
