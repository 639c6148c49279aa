"""Grammar for a feed's event log, and its inverse.

Each non-blank line is either a comic found in the feed or a checkpoint of
when the feed was last read:

    <http://www.goodbyetohalos.com/comic/01137>
    read 2017-07-17T03:21:21.492180+00:00
"""

import logging
import re
from datetime import datetime
from typing import Iterable, List, Optional

import pytz

from ..models.feed import ComicUrl, FeedEvent, Read
from .cursor import WHITESPACE, Cursor
from .errors import ExpectedMessage

logger = logging.getLogger(__name__)

EVENT_FORMS = """a feed event. One of:
 - "<url>"
 - "read DATE\""""

TIMESTAMP_RE = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2})[Tt ]([0-9]{2}:[0-9]{2}:[0-9]{2})(\.[0-9]+)?([Zz]|[+-][0-9]{2}:[0-9]{2})"
)


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp, returned in UTC.

    The offset is required (``Z`` or ``+HH:MM``). Fractional seconds may have
    any number of digits and are kept to microsecond precision.
    """
    match = TIMESTAMP_RE.fullmatch(text.strip(WHITESPACE))
    if match is None:
        return None

    date, time, fraction, offset = match.groups()
    fraction = ((fraction or "")[1:] + "000000")[:6]
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        timestamp = datetime.fromisoformat(f"{date}T{time}.{fraction}{offset}")
    except ValueError:
        return None
    return timestamp.astimezone(pytz.utc)


def parse_event(cursor: Cursor) -> FeedEvent:
    """Parse one trimmed, non-blank event log line."""
    if cursor.starts_with_no_case("read"):
        cursor = cursor.token_no_case("read").space()
        timestamp = parse_timestamp(cursor.text)
        if timestamp is None:
            raise cursor.expected_remainder("a valid date")
        return Read(timestamp)

    if cursor.starts_with("<"):
        cursor, url = cursor.read_between("<", ">")
        cursor.end()
        return ComicUrl(url)

    raise ExpectedMessage(EVENT_FORMS, cursor.row, (cursor.column, cursor.column + len(cursor.text)))


def parse_events(text: str) -> List[FeedEvent]:
    """
    Parse a whole event log.

    Args:
        text: Contents of the event log

    Returns:
        The events in log order

    Raises:
        ParseError: On the first line that is not a valid event
    """
    events = []
    for row, line in enumerate(text.split("\n"), start=1):
        cursor = Cursor.for_line(row, line).trim()
        if cursor.is_empty:
            continue
        events.append(parse_event(cursor))

    logger.debug(f"Parsed {len(events)} event(s)")
    return events


def format_event(event: FeedEvent) -> str:
    """Render an event as one event log line."""
    if isinstance(event, Read):
        timestamp = event.timestamp.astimezone(pytz.utc)
        return f"read {timestamp.isoformat(timespec='microseconds')}"
    if isinstance(event, ComicUrl):
        return f"<{event.url}>"
    raise TypeError(f"Unknown feed event: {event!r}")


def format_events(events: Iterable[FeedEvent]) -> str:
    return "".join(f"{format_event(event)}\n" for event in events)


def last_read(events: Iterable[FeedEvent]) -> Optional[Read]:
    """The most recent read checkpoint in the log, if any."""
    latest = None
    for event in events:
        if isinstance(event, Read):
            latest = event
    return latest


def comics_since_last_read(events: List[FeedEvent]) -> List[ComicUrl]:
    """Comics recorded after the last read checkpoint (all of them if none)."""
    unread = []
    for event in events:
        if isinstance(event, Read):
            unread = []
        elif isinstance(event, ComicUrl):
            unread.append(event)
    return unread
