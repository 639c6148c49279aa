"""
Feed Tracker - parse the configuration and event logs of a personal feed tracker.

This package provides:
1. A configuration parser producing one FeedInfo per watched feed, with
   update policies and the sticky "root" and "command" directives
2. An event log parser (and writer) for discovered comics and read checkpoints
3. Parse errors that point at the exact line and columns of bad input
"""

__version__ = "1.0.0"

from .core.config import parse_config
from .core.errors import ExpectedChar, ExpectedMessage, ParseError
from .core.events import format_events, parse_events
from .models.feed import FeedEvent, FeedInfo, FilterType, UpdateSpec, Weekday

__all__ = [
    "parse_config",
    "parse_events",
    "format_events",
    "ParseError",
    "ExpectedChar",
    "ExpectedMessage",
    "FeedInfo",
    "FeedEvent",
    "FilterType",
    "UpdateSpec",
    "Weekday",
]
