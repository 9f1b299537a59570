"""Configuration module for eventlink."""

from eventlink.config.settings import CODEC_CONFIG, EXPORT_CONFIG, CodecConfig, ExportConfig
from eventlink.config.constants import (
    DEFAULT_IMAGE_URL,
    MAX_EMBEDDED_IMAGE_LENGTH,
    ICS_PRODID,
    TIMEZONES,
    REMINDERS,
    WEEK_DAYS,
)

__all__ = [
    "CODEC_CONFIG",
    "EXPORT_CONFIG",
    "CodecConfig",
    "ExportConfig",
    "DEFAULT_IMAGE_URL",
    "MAX_EMBEDDED_IMAGE_LENGTH",
    "ICS_PRODID",
    "TIMEZONES",
    "REMINDERS",
    "WEEK_DAYS",
]
