"""Reading and writing the configuration file and event logs."""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

from ..core.config import parse_config
from ..core.events import format_events, parse_events
from ..models.feed import FeedEvent, FeedInfo

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file, logging when it is missing."""
    path = Path(path)
    if not path.exists():
        logger.error(f"File not found: {path}")
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def load_config(path: PathLike) -> List[FeedInfo]:
    """Read and parse a configuration file."""
    feeds = parse_config(read_text(path))
    logger.info(f"Loaded {len(feeds)} feed(s) from {path}")
    return feeds


def load_events(path: PathLike) -> List[FeedEvent]:
    """Read and parse an event log. A missing log has no events yet."""
    path = Path(path)
    if not path.exists():
        logger.debug(f"No event log at {path}")
        return []
    return parse_events(read_text(path))


def append_events(path: PathLike, events: Iterable[FeedEvent]) -> int:
    """Append events to a log, creating it if needed. Returns the number written."""
    events = list(events)
    if not events:
        return 0

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Keep the first appended event on a line of its own
    prefix = ""
    if path.exists() and path.stat().st_size > 0:
        with open(path, "rb") as f:
            f.seek(-1, os.SEEK_END)
            if f.read(1) != b"\n":
                prefix = "\n"

    with open(path, "a", encoding="utf-8") as f:
        f.write(prefix + format_events(events))
    logger.debug(f"Appended {len(events)} event(s) to {path}")
    return len(events)
