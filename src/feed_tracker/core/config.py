"""Grammar for the feed configuration file.

A configuration file holds one feed per line:

    "Questionable Content" <http://questionablecontent.net/QCRSS.xml> @ on Saturday

Blank lines and lines starting with ``#`` are ignored. Two directives change
the settings applied to every feed declared after them:

    root /path/to/comics
    command firefox "--new-tab"

A directive with nothing after it unsets the value again.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple

from ..models.feed import FeedInfo
from .cursor import Cursor
from .policy import parse_policies
from .tokens import parse_command, parse_quoted

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Directives:
    """Directive values in effect at some line of a configuration file."""
    root: Optional[Path] = None
    command: Optional[Tuple[str, ...]] = None


def parse_name(cursor: Cursor) -> Tuple[Cursor, str]:
    return parse_quoted(cursor, ('"',))


def parse_url(cursor: Cursor) -> Tuple[Cursor, str]:
    return cursor.trim_start().read_between("<", ">")


def parse_feed_line(cursor: Cursor, directives: Directives = Directives()) -> Tuple[Cursor, FeedInfo]:
    """Parse ``"name" <url> [@ clause]*`` stamped with the given directives."""
    cursor, name = parse_name(cursor)
    cursor, url = parse_url(cursor.trim_start())
    cursor, policies = parse_policies(cursor.trim_start())
    if not cursor.is_empty:
        raise cursor.expected_remainder('a policy starting with "@"')

    feed = FeedInfo(
        name=name,
        url=url,
        update_policies=frozenset(policies),
        root=directives.root,
        command=directives.command,
    )
    return cursor, feed


def parse_root_directive(cursor: Cursor, directives: Directives) -> Directives:
    cursor = cursor.token_no_case("root")
    if cursor.trim().is_empty:
        logger.debug(f"Line {cursor.row}: root unset")
        return replace(directives, root=None)

    path = cursor.space().trim().text
    logger.debug(f"Line {cursor.row}: root set to {path}")
    return replace(directives, root=Path(path))


def parse_command_directive(cursor: Cursor, directives: Directives) -> Directives:
    cursor = cursor.token_no_case("command")
    if cursor.trim().is_empty:
        logger.debug(f"Line {cursor.row}: command unset")
        return replace(directives, command=None)

    _, parts = parse_command(cursor.space())
    logger.debug(f"Line {cursor.row}: command set to {parts}")
    return replace(directives, command=tuple(parts))


def parse_config(text: str) -> List[FeedInfo]:
    """
    Parse a whole configuration file.

    Args:
        text: Contents of the configuration file

    Returns:
        The declared feeds, in file order

    Raises:
        ParseError: On the first line that is neither a directive nor a feed
    """
    feeds = []
    directives = Directives()

    for row, line in enumerate(text.split("\n"), start=1):
        cursor = Cursor.for_line(row, line).trim()

        if cursor.is_empty or cursor.starts_with("#"):
            continue

        if cursor.starts_with("root"):
            directives = parse_root_directive(cursor, directives)
        elif cursor.starts_with("command"):
            directives = parse_command_directive(cursor, directives)
        else:
            _, feed = parse_feed_line(cursor, directives)
            logger.debug(f"Line {row}: feed '{feed.name}' with {len(feed.update_policies)} policies")
            feeds.append(feed)

    logger.info(f"Parsed {len(feeds)} feed(s) from configuration")
    return feeds
