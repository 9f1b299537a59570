"""System timezone lookup.

Timezones are carried as labels only; nothing here converts wall-clock
values between zones.
"""

import logging

import tzlocal

from eventlink.config.constants import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


def local_timezone_name() -> str:
    """Return the IANA name of the user's system zone, or UTC if unknown."""
    try:
        name = tzlocal.get_localzone_name()
    except Exception as exc:
        logger.warning("Couldn't determine local timezone, using %s: %s", DEFAULT_TIMEZONE, exc)
        return DEFAULT_TIMEZONE
    return name or DEFAULT_TIMEZONE
