"""Share-token codec: EventRecord <-> compact, URL-safe text.

A token is built in three layers:

    JSON  ->  escape_component  ->  to_base64  ->  escape_component

The inner escape makes arbitrary Unicode safe for base64 of ASCII text; the
outer escape protects base64's own "+", "/" and "=" inside a query string.
The layering matches the browser implementation, so tokens produced by
either side decode on the other.
"""

import base64
import binascii
import dataclasses
import json
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional
from urllib.parse import quote, unquote

from eventlink.config.constants import URI_COMPONENT_SAFE
from eventlink.config.settings import CODEC_CONFIG, CodecConfig
from eventlink.core.event_model import EventRecord, default_event
from eventlink.exceptions.errors import EventDecodeError, EventValidationError

logger = logging.getLogger(__name__)

# A "%" not followed by two hex digits
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Optional text fields left out of the token when empty
_OMIT_WHEN_EMPTY = ("description", "location")


@dataclass
class DecodeResult:
    """Result of decoding a share token."""
    success: bool
    event: Optional[EventRecord] = None
    error: Optional[str] = None

    def event_or_default(self, today: Optional[date] = None) -> EventRecord:
        """Return the decoded event, or a blank one when decoding failed."""
        if self.success and self.event is not None:
            return self.event
        return default_event(today=today)


def escape_component(text: str) -> str:
    """Percent-encode text the way encodeURIComponent does (UTF-8)."""
    return quote(text, safe=URI_COMPONENT_SAFE)


def unescape_component(text: str) -> str:
    """Reverse escape_component.

    Raises:
        EventDecodeError: On a stray "%" or an escape that isn't valid UTF-8.
    """
    if _BAD_PERCENT_ESCAPE.search(text):
        raise EventDecodeError("percent-decoding", "malformed percent escape")
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise EventDecodeError("percent-decoding", f"invalid UTF-8 sequence: {exc}") from exc


def to_base64(text: str) -> str:
    """Base64-encode ASCII text (the output of escape_component)."""
    return base64.b64encode(text.encode("ascii")).decode("ascii")


def from_base64(text: str) -> str:
    """Reverse to_base64, tolerating missing "=" padding.

    Raises:
        EventDecodeError: If the text isn't base64 or doesn't decode to ASCII.
    """
    cleaned = text.strip()
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EventDecodeError("base64", f"invalid base64 payload: {exc}") from exc
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError as exc:
        raise EventDecodeError("base64", "payload is not ASCII text") from exc


def reduce_for_sharing(record: EventRecord, config: CodecConfig = CODEC_CONFIG) -> EventRecord:
    """Apply the size-reduction policy to a copy of the record.

    Embedded (data:) images longer than the configured limit are dropped.
    Remote image URLs are kept whatever their length.
    """
    if record.has_embedded_image and len(record.image_url) > config.max_embedded_image_length:
        logger.info(
            "Dropping embedded image (%d chars, limit %d) from share token",
            len(record.image_url), config.max_embedded_image_length,
        )
        return dataclasses.replace(record, image_url=None)
    return record


def encode_event(record: EventRecord, config: CodecConfig = CODEC_CONFIG) -> str:
    """Serialize an event into a URL-safe share token.

    Args:
        record: The event to share. It is never modified.
        config: Codec settings (embedded image limit).

    Returns:
        The token to place in the share link's data parameter.
    """
    payload = reduce_for_sharing(record, config).to_dict()
    for key in _OMIT_WHEN_EMPTY:
        if not payload.get(key):
            del payload[key]

    json_text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return escape_component(to_base64(escape_component(json_text)))


def decode_event(token: Optional[str]) -> DecodeResult:
    """Rebuild an event from a share token.

    Never raises: every malformed input yields DecodeResult(success=False)
    with a short reason, so callers can fall back to a blank event.

    Args:
        token: The value of the share link's data parameter.

    Returns:
        DecodeResult with the event on success or an error message.
    """
    if not isinstance(token, str) or not token.strip():
        logger.warning("Failed to decode event data: empty token")
        return DecodeResult(success=False, error="empty token")

    try:
        base64_text = unescape_component(token.strip())
        json_text = unescape_component(from_base64(base64_text))
        try:
            data = json.loads(json_text)
        except (ValueError, RecursionError) as exc:
            raise EventDecodeError("json", f"invalid JSON: {exc}") from exc
        try:
            event = EventRecord.from_dict(data)
        except EventValidationError as exc:
            raise EventDecodeError("event", str(exc)) from exc
    except EventDecodeError as exc:
        logger.warning("Failed to decode event data (%d chars): %s", len(token), exc)
        return DecodeResult(success=False, error=str(exc))

    return DecodeResult(success=True, event=event)


def header_image_url(record: EventRecord, config: CodecConfig = CODEC_CONFIG) -> str:
    """Image to show for an event: its own, or the configured default."""
    return record.image_url or config.default_image_url
