"""Entry point for running eventlink as a module.

Usage: python -m eventlink {share,decode,links,ics} ...
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from eventlink.core.calendar_links import calendar_links
from eventlink.core.codec import decode_event
from eventlink.core.event_model import EventRecord
from eventlink.core.ics_builder import build_calendar_file
from eventlink.core.share import build_share_url, load_shared_event
from eventlink.exceptions.errors import EventValidationError

logger = logging.getLogger(__name__)


def _read_event(path: Optional[str]) -> EventRecord:
    if path and path != "-":
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise EventValidationError(f"Event file is not valid JSON: {exc}") from exc
    return EventRecord.from_dict(data)


def _cmd_share(args) -> int:
    print(build_share_url(args.page_url, _read_event(args.event)))
    return 0


def _cmd_decode(args) -> int:
    if "://" in args.token or args.token.startswith("?"):
        result = load_shared_event(args.token)
    else:
        result = decode_event(args.token)
    if not result.success:
        print(f"Could not decode event: {result.error}", file=sys.stderr)
        return 1
    print(json.dumps(result.event.to_dict(), indent=2, ensure_ascii=False))
    return 0


def _cmd_links(args) -> int:
    for provider, url in calendar_links(_read_event(args.event)).items():
        print(f"{provider}: {url}")
    return 0


def _cmd_ics(args) -> int:
    calendar_file = build_calendar_file(_read_event(args.event))
    output = args.output or calendar_file.filename
    if output == "-":
        sys.stdout.write(calendar_file.content)
        return 0
    with open(output, "wb") as handle:
        handle.write(calendar_file.to_bytes())
    logger.info("Wrote %s", output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eventlink",
        description="Create shareable calendar event links and .ics files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    share = sub.add_parser("share", help="print a share link for an event JSON file")
    share.add_argument("event", nargs="?", help="event JSON file (default: stdin)")
    share.add_argument("--page-url", required=True, help="page that opens shared events")
    share.set_defaults(func=_cmd_share)

    decode = sub.add_parser("decode", help="decode a share token or share link")
    decode.add_argument("token")
    decode.set_defaults(func=_cmd_decode)

    links = sub.add_parser("links", help="print Google, Yahoo and Outlook links")
    links.add_argument("event", nargs="?", help="event JSON file (default: stdin)")
    links.set_defaults(func=_cmd_links)

    ics = sub.add_parser("ics", help="write an .ics file")
    ics.add_argument("event", nargs="?", help="event JSON file (default: stdin)")
    ics.add_argument("-o", "--output", help="output path, '-' for stdout (default: from title)")
    ics.set_defaults(func=_cmd_ics)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return args.func(args)
    except (EventValidationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
