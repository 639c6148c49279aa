"""Feed model for the tracker configuration and event log."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional, Tuple


class Weekday(Enum):
    """Days of the week, numbered like ``datetime.weekday()``."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class FilterType(Enum):
    """What a filter policy does and which part of an entry it looks at."""
    KEEP_TITLE = "keep title"
    KEEP_URL = "keep url"
    IGNORE_TITLE = "ignore title"
    IGNORE_URL = "ignore url"

    @property
    def keeps(self) -> bool:
        return self in (FilterType.KEEP_TITLE, FilterType.KEEP_URL)

    @property
    def on_title(self) -> bool:
        return self in (FilterType.KEEP_TITLE, FilterType.IGNORE_TITLE)


class UpdateSpec:
    """Base class for the ``@ ...`` update policies of a feed."""


@dataclass(frozen=True)
class On(UpdateSpec):
    """Check the feed on a given day of the week."""
    weekday: Weekday


@dataclass(frozen=True)
class Every(UpdateSpec):
    """Check the feed every ``count`` days."""
    count: int


@dataclass(frozen=True)
class Overlap(UpdateSpec):
    """Reopen the last ``count`` already read comics."""
    count: int


@dataclass(frozen=True)
class Comics(UpdateSpec):
    """Wait for ``count`` new comics before checking."""
    count: int


@dataclass(frozen=True)
class Filter(UpdateSpec):
    """Keep or ignore entries whose title or url matches ``pattern``."""
    kind: FilterType
    pattern: str


@dataclass(frozen=True)
class OpenAll(UpdateSpec):
    """Open every new comic instead of only the first one."""


@dataclass(frozen=True)
class FeedInfo:
    """Configuration for one tracked feed.

    Attributes:
        name: The display name of the feed
        url: The URL the feed is retrieved from
        update_policies: Unordered, deduplicated ``@ ...`` policies
        root: Root directory override active when the feed was declared
        command: Command override active when the feed was declared
    """
    name: str
    url: str
    update_policies: FrozenSet[UpdateSpec] = field(default_factory=frozenset)
    root: Optional[Path] = None
    command: Optional[Tuple[str, ...]] = None


class FeedEvent:
    """Base class for the entries of a feed's event log."""


@dataclass(frozen=True)
class Read(FeedEvent):
    """The feed was read up to this point in time (UTC)."""
    timestamp: datetime


@dataclass(frozen=True)
class ComicUrl(FeedEvent):
    """A comic discovered in the feed."""
    url: str
