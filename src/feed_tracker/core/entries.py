"""Apply a feed's filter policies to the entries of a fetched feed."""

import logging
import re
from typing import Any, Iterable, List, Optional

import feedparser

from ..models.feed import ComicUrl, FeedEvent, FeedInfo, Filter, UpdateSpec

logger = logging.getLogger(__name__)


def fetch_entries(feed: FeedInfo, source: Optional[Any] = None) -> List[Any]:
    """
    Fetch and parse a feed with feedparser.

    Args:
        feed: Feed configuration object
        source: Document to parse instead of ``feed.url`` (a string, stream or path)

    Returns:
        The entries of the feed, in document order
    """
    parsed = feedparser.parse(source if source is not None else feed.url)

    if parsed.get("bozo"):
        logger.warning(f"⚠️ Feed '{feed.name}' is not well formed: {parsed.get('bozo_exception')}")

    logger.info(f"📥 Fetched {len(parsed.entries)} entries from '{feed.name}'")
    return list(parsed.entries)


def _matches(policy: Filter, entry: Any) -> bool:
    key = "title" if policy.kind.on_title else "link"
    value = entry.get(key, "") or ""
    return re.search(policy.pattern, value) is not None


def apply_filters(policies: Iterable[UpdateSpec], entries: Iterable[Any]) -> List[Any]:
    """
    Keep the entries allowed by the filter policies.

    An entry is dropped when it matches any ignore filter. When keep filters
    exist, an entry must also match at least one of them. Policies other than
    filters are ignored.
    """
    filters = [policy for policy in policies if isinstance(policy, Filter)]
    keeps = [policy for policy in filters if policy.kind.keeps]
    ignores = [policy for policy in filters if not policy.kind.keeps]

    kept = []
    for entry in entries:
        if any(_matches(policy, entry) for policy in ignores):
            logger.debug(f"Ignoring entry {entry.get('link')}")
            continue
        if keeps and not any(_matches(policy, entry) for policy in keeps):
            logger.debug(f"Not keeping entry {entry.get('link')}")
            continue
        kept.append(entry)
    return kept


def new_entries(entries: Iterable[Any], events: Iterable[FeedEvent]) -> List[Any]:
    """Entries whose link has not been recorded in the event log yet."""
    seen = {event.url for event in events if isinstance(event, ComicUrl)}
    return [entry for entry in entries if entry.get("link", "").strip() not in seen]
