"""Grammar for the ``@ ...`` update policy clauses of a feed line."""

import logging
import re
import string
from typing import List, Tuple

from ..models.feed import Comics, Every, Filter, FilterType, On, OpenAll, Overlap, UpdateSpec
from .cursor import Cursor
from .errors import ExpectedMessage
from .tokens import parse_delimited_pattern, parse_number, parse_weekday

logger = logging.getLogger(__name__)

POLICY_FORMS = """a policy definition. One of:
 - "@ on WEEKDAY"
 - "@ every # day(s)"
 - "@ overlap # comic(s)"
 - "@ keep title|url /pattern/"
 - "@ ignore title|url /pattern/"
 - "@ open all"
 - "@ # new comic(s)\""""

FILTER_TYPES = {
    ("keep", "title"): FilterType.KEEP_TITLE,
    ("keep", "url"): FilterType.KEEP_URL,
    ("ignore", "title"): FilterType.IGNORE_TITLE,
    ("ignore", "url"): FilterType.IGNORE_URL,
}


def _parse_on(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    cursor = cursor.token_no_case("on").space()
    cursor, weekday = parse_weekday(cursor)
    return cursor.space_or_end(), On(weekday)


def _parse_every(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    cursor = cursor.token_no_case("every").space()
    cursor, count = parse_number(cursor)
    cursor, _ = cursor.space().first_token_of_no_case(["days", "day"])
    return cursor.space_or_end(), Every(count)


def _parse_overlap(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    cursor = cursor.token_no_case("overlap").space()
    cursor, count = parse_number(cursor)
    cursor, _ = cursor.space().first_token_of_no_case(["comics", "comic"])
    return cursor.space_or_end(), Overlap(count)


def _parse_filter(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    cursor, action = cursor.first_token_of_no_case(["keep", "ignore"])
    cursor, target = cursor.space().first_token_of_no_case(["title", "url"])
    start = cursor.space()
    cursor, pattern = parse_delimited_pattern(start)

    try:
        re.compile(pattern)
    except re.error as e:
        raise ExpectedMessage(
            f"/{pattern}/ to be a valid pattern: {e}",
            start.row,
            (start.column + 1, start.column + 1 + len(pattern)),
        ) from e

    kind = FILTER_TYPES.get((action, target))
    if kind is None:
        raise AssertionError(f"invalid filter type: {action} {target}")
    return cursor.space_or_end(), Filter(kind, pattern)


def _parse_open_all(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    cursor = cursor.token_no_case("open").space().token_no_case("all")
    return cursor.space_or_end(), OpenAll()


def _parse_new_comics(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    cursor, count = parse_number(cursor)
    cursor = cursor.trim_start().token_no_case("new").space()
    cursor, _ = cursor.first_token_of_no_case(["comics", "comic"])
    return cursor.space_or_end(), Comics(count)


def _starts_with_digit(cursor: Cursor) -> bool:
    return cursor.peek() is not None and cursor.peek() in string.digits


# Checked in order: the first matching prefix decides which clause is parsed.
CLAUSES = [
    (lambda c: c.starts_with_no_case("on"), _parse_on),
    (lambda c: c.starts_with_no_case("every"), _parse_every),
    (lambda c: c.starts_with_no_case("overlap"), _parse_overlap),
    (lambda c: c.starts_with_no_case("keep") or c.starts_with_no_case("ignore"), _parse_filter),
    (lambda c: c.starts_with_no_case("open"), _parse_open_all),
    (_starts_with_digit, _parse_new_comics),
]


def parse_policy(cursor: Cursor) -> Tuple[Cursor, UpdateSpec]:
    """Parse a single ``@ <clause>`` into an UpdateSpec."""
    cursor = cursor.trim_start().token("@").space()
    for matches, parse_clause in CLAUSES:
        if matches(cursor):
            return parse_clause(cursor)
    raise cursor.expected_remainder(POLICY_FORMS)


def parse_policies(cursor: Cursor) -> Tuple[Cursor, List[UpdateSpec]]:
    """Parse zero or more ``@`` clauses in the order they appear."""
    policies = []
    cursor = cursor.trim_start()
    while cursor.starts_with("@"):
        cursor, policy = parse_policy(cursor)
        logger.debug(f"Parsed policy {policy} at line {cursor.row}")
        policies.append(policy)
        cursor = cursor.trim_start()
    return cursor, policies


def format_policy(policy: UpdateSpec) -> str:
    """Render a policy back into the clause that produces it."""
    if isinstance(policy, On):
        return f"@ on {policy.weekday.name.lower()}"
    if isinstance(policy, Every):
        return f"@ every {policy.count} days"
    if isinstance(policy, Overlap):
        return f"@ overlap {policy.count} comics"
    if isinstance(policy, Filter):
        delimiter = next((c for c in "/|!#%~" if c not in policy.pattern), "\x01")
        return f"@ {policy.kind.value} {delimiter}{policy.pattern}{delimiter}"
    if isinstance(policy, OpenAll):
        return "@ open all"
    if isinstance(policy, Comics):
        return f"@ {policy.count} new comics"
    raise TypeError(f"Unknown update policy: {policy!r}")
