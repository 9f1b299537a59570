"""Share links: embed a token in a page URL and read it back.

Link shortening is an optional external collaborator. It is attempted once
and any failure falls back to the original link.
"""

import logging
from typing import Optional, Protocol
from urllib.parse import parse_qs, urlsplit, urlunsplit

from eventlink.config.constants import SHARE_QUERY_PARAM
from eventlink.config.settings import CODEC_CONFIG, EXPORT_CONFIG, CodecConfig, ExportConfig
from eventlink.core.codec import DecodeResult, decode_event, encode_event
from eventlink.core.event_model import EventRecord

logger = logging.getLogger(__name__)


class UrlShortener(Protocol):
    """Anything that can turn a long URL into a short one."""

    def shorten(self, url: str) -> str:
        ...


def build_share_url(page_url: str, event: EventRecord, config: CodecConfig = CODEC_CONFIG) -> str:
    """Build "<page-url>?data=<token>" for an event.

    Any query string or fragment already on the page URL is dropped.
    """
    parts = urlsplit(page_url)
    base = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return f"{base}?{SHARE_QUERY_PARAM}={encode_event(event, config)}"


def extract_token(url: str) -> Optional[str]:
    """Return the data parameter of a share URL, or None if it has none."""
    values = parse_qs(urlsplit(url).query).get(SHARE_QUERY_PARAM)
    return values[0] if values else None


def load_shared_event(url: str) -> DecodeResult:
    """Decode the event carried by a share URL."""
    token = extract_token(url)
    if token is None:
        return DecodeResult(success=False, error=f"no '{SHARE_QUERY_PARAM}' parameter in URL")
    return decode_event(token)


def shorten_or_fallback(
    url: str,
    shortener: Optional[UrlShortener] = None,
    config: ExportConfig = EXPORT_CONFIG,
) -> str:
    """Try to shorten a share URL once, returning the original on any failure.

    Args:
        url: The long share URL.
        shortener: Optional shortening service.
        config: Export settings (minimum length worth shortening).

    Returns:
        The shortened URL, or `url` unchanged.
    """
    if shortener is None or len(url) < config.shorten_min_length:
        return url
    try:
        short = shortener.shorten(url)
    except Exception as exc:
        logger.warning("Shortening service unavailable, falling back to long URL: %s", exc)
        return url
    if not short or not short.strip():
        logger.warning("Shortening service returned an empty result, falling back to long URL")
        return url
    return short.strip()
