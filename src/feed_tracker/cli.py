#!/usr/bin/env python
"""
Check a feed configuration file and event logs.

This script parses the configuration (and any event logs given), reports the
feeds it found, and points at the exact line and columns of the first error.
"""

import os
import sys
import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv

from .core.config import parse_config
from .core.errors import ParseError, render_diagnostic
from .core.events import comics_since_last_read, last_read
from .core.policy import format_policy
from .utils.file_utils import load_events, read_text
from .utils.logging_utils import setup_logging

DEFAULT_CONFIG = "config/feeds.conf"


def load_environment():
    """Load environment variables based on the current environment."""
    env = os.environ.get("ENVIRONMENT", "development").lower()

    # Try environment-specific .env file first
    env_file = Path(f"config/.env.{env}")
    if env_file.exists():
        logging.info(f"📄 Loading environment from {env_file}")
        load_dotenv(env_file)
        return

    # Fall back to regular .env files
    for env_path in [Path("config/.env"), Path(".env")]:
        if env_path.exists():
            logging.info(f"📄 Loading environment from {env_path}")
            load_dotenv(env_path)
            return

    logging.debug("No .env file found. Using environment variables or defaults.")


def build_parser(default_config=DEFAULT_CONFIG):
    parser = argparse.ArgumentParser(description="Check a feed configuration file and event logs")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level"
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Log to file in addition to console"
    )
    parser.add_argument(
        "--config",
        help="Path to the feed configuration file",
        default=default_config
    )
    parser.add_argument(
        "--events",
        nargs="*",
        default=[],
        help="Event log files to check"
    )
    return parser


def check_config(path):
    """Parse the configuration, logging a diagnostic on failure. Returns the feeds or None."""
    text = read_text(path)
    try:
        feeds = parse_config(text)
    except ParseError as e:
        logging.error(f"❌ Invalid configuration {path}:\n{render_diagnostic(e, text)}")
        return None

    for feed in feeds:
        policies = ", ".join(sorted(format_policy(policy) for policy in feed.update_policies)) or "none"
        logging.info(f"  {feed.name} | {feed.url} | policies: {policies}")
        if feed.root is not None:
            logging.debug(f"    root: {feed.root}")
        if feed.command is not None:
            logging.debug(f"    command: {list(feed.command)}")
    return feeds


def check_event_log(path):
    """Parse an event log, logging a diagnostic on failure. Returns True when valid."""
    try:
        events = load_events(path)
    except ParseError as e:
        logging.error(f"❌ Invalid event log {path}:\n{render_diagnostic(e, read_text(path))}")
        return False

    checkpoint = last_read(events)
    unread = comics_since_last_read(events)
    when = checkpoint.timestamp.isoformat() if checkpoint else "never"
    logging.info(f"  {path}: {len(events)} event(s), last read {when}, {len(unread)} unread comic(s)")
    return True


def main(argv=None):
    """Run the configuration check."""
    # Parse just the logging arguments first
    log_args, _ = build_parser().parse_known_args(argv)
    setup_logging(log_level=getattr(logging, log_args.log_level), log_to_file=log_args.log_to_file)

    load_environment()

    args = build_parser(os.environ.get("FEED_TRACKER_CONFIG", DEFAULT_CONFIG)).parse_args(argv)

    try:
        logging.info(f"Checking configuration {args.config}")
        feeds = check_config(args.config)
        if feeds is None:
            return 1
        logging.info(f"Configuration OK: {len(feeds)} feed(s)")

        ok = True
        for path in args.events:
            ok = check_event_log(path) and ok
        return 0 if ok else 1

    except KeyboardInterrupt:
        logging.warning("\nCheck interrupted by user")
        return 130

    except Exception as e:
        logging.error(f"Check failed: {str(e)}")
        logging.debug("Exception details:", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
