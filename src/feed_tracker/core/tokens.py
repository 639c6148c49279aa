"""Token-level recognizers built on :class:`Cursor`."""

import string
from typing import List, Tuple

from ..models.feed import Weekday
from .cursor import Cursor, is_whitespace

WEEKDAY_NAMES = [
    ("sunday", Weekday.SUNDAY),
    ("monday", Weekday.MONDAY),
    ("tuesday", Weekday.TUESDAY),
    ("wednesday", Weekday.WEDNESDAY),
    ("thursday", Weekday.THURSDAY),
    ("friday", Weekday.FRIDAY),
    ("saturday", Weekday.SATURDAY),
]

QUOTES = ("'", '"')


def parse_number(cursor: Cursor) -> Tuple[Cursor, int]:
    """Read a run of decimal digits as a non-negative integer."""
    cursor = cursor.trim_start()
    end = 0
    while end < len(cursor.text) and cursor.text[end] in string.digits:
        end += 1
    if end == 0:
        raise cursor.expected("digit")
    return cursor.advance(end), int(cursor.text[:end])


def parse_weekday(cursor: Cursor) -> Tuple[Cursor, Weekday]:
    """Read one of the seven full English day names, ignoring case."""
    for name, weekday in WEEKDAY_NAMES:
        if cursor.starts_with_no_case(name):
            return cursor.advance(len(name)), weekday
    raise cursor.expected_remainder("a weekday")


def parse_quoted(cursor: Cursor, quotes=('"',)) -> Tuple[Cursor, str]:
    """Read a string wrapped in one of ``quotes``."""
    cursor = cursor.trim_start()
    quote = cursor.peek()
    if quote not in quotes:
        quote = quotes[0]
    return cursor.read_between(quote, quote)


def parse_delimited_pattern(cursor: Cursor) -> Tuple[Cursor, str]:
    """Read a pattern wrapped in whatever character comes first, like ``/abc/``."""
    delimiter = cursor.peek()
    if delimiter is None or is_whitespace(delimiter):
        raise cursor.expected("a pattern")
    return cursor.read_between(delimiter, delimiter)


def parse_command_part(cursor: Cursor) -> Tuple[Cursor, str]:
    cursor = cursor.trim_start()
    if cursor.peek() in QUOTES:
        return parse_quoted(cursor, QUOTES)

    end = 0
    while end < len(cursor.text) and not is_whitespace(cursor.text[end]):
        end += 1
    return cursor.advance(end), cursor.text[:end]


def parse_command(cursor: Cursor) -> Tuple[Cursor, List[str]]:
    """Split the rest of the line into shell-like arguments.

    Arguments are separated by whitespace, except inside '...' or "..."
    which are read as a single argument without the quotes.
    """
    parts = []
    cursor = cursor.trim()
    while not cursor.is_empty:
        cursor, part = parse_command_part(cursor)
        parts.append(part)
        cursor = cursor.trim_start()
    return cursor, parts


def parse_command_text(text: str, row: int = 1) -> List[str]:
    """Tokenize a standalone command string."""
    _, parts = parse_command(Cursor.for_line(row, text))
    return parts
