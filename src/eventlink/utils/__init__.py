"""Utility functions for eventlink."""

from eventlink.utils.date_formatting import (
    format_date_display,
    format_datetime_display,
    format_time_display,
    generate_time_options,
)

__all__ = [
    "format_date_display",
    "format_datetime_display",
    "format_time_display",
    "generate_time_options",
]
