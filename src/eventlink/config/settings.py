"""Runtime settings for eventlink.

Settings are immutable dataclasses. The module-level instances are the
defaults every public function falls back to; callers wanting different
values build their own instance (optionally from the environment) and pass
it in explicitly.
"""

import logging
import os
from dataclasses import dataclass

from eventlink.config.constants import (
    DEFAULT_IMAGE_URL,
    MAX_EMBEDDED_IMAGE_LENGTH,
    ICS_PRODID,
    ICS_UID_DOMAIN,
    ICS_REMINDER_DESCRIPTION,
    SHORTEN_MIN_LENGTH,
)

logger = logging.getLogger(__name__)

ENV_MAX_IMAGE_LENGTH = "EVENTLINK_MAX_IMAGE_LENGTH"
ENV_DEFAULT_IMAGE_URL = "EVENTLINK_DEFAULT_IMAGE_URL"
ENV_UID_DOMAIN = "EVENTLINK_UID_DOMAIN"


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", name, raw)
        return default
    return value


@dataclass(frozen=True)
class CodecConfig:
    """Settings for share-token encoding."""

    max_embedded_image_length: int = MAX_EMBEDDED_IMAGE_LENGTH
    default_image_url: str = DEFAULT_IMAGE_URL

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Build a config honouring EVENTLINK_* environment overrides."""
        return cls(
            max_embedded_image_length=_int_from_env(
                ENV_MAX_IMAGE_LENGTH, MAX_EMBEDDED_IMAGE_LENGTH
            ),
            default_image_url=os.environ.get(ENV_DEFAULT_IMAGE_URL) or DEFAULT_IMAGE_URL,
        )


@dataclass(frozen=True)
class ExportConfig:
    """Settings for calendar-file generation and link sharing."""

    prodid: str = ICS_PRODID
    uid_domain: str = ICS_UID_DOMAIN
    reminder_description: str = ICS_REMINDER_DESCRIPTION
    shorten_min_length: int = SHORTEN_MIN_LENGTH

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """Build a config honouring EVENTLINK_* environment overrides."""
        return cls(uid_domain=os.environ.get(ENV_UID_DOMAIN) or ICS_UID_DOMAIN)


CODEC_CONFIG = CodecConfig()
EXPORT_CONFIG = ExportConfig()
