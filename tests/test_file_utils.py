"""Tests for reading and writing configuration and event log files."""

import tempfile
import unittest
from datetime import datetime
from pathlib import Path

import pytz

from feed_tracker.core.errors import ParseError
from feed_tracker.models.feed import ComicUrl, Read
from feed_tracker.utils.file_utils import append_events, load_config, load_events, read_text


class TestFileUtils(unittest.TestCase):
    """Test cases for the file helpers."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_read_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            read_text(self.dir / "missing.conf")

    def test_load_config(self):
        path = self.dir / "feeds.conf"
        path.write_text('root /comics\n"Électrum" <https://electrum.cubemelon.net/feed>\n', encoding="utf-8")

        [feed] = load_config(path)
        self.assertEqual(feed.name, "Électrum")
        self.assertEqual(feed.root, Path("/comics"))

    def test_load_config_error(self):
        path = self.dir / "feeds.conf"
        path.write_text('"A" <http://a/> @ on someday\n', encoding="utf-8")

        with self.assertRaises(ParseError):
            load_config(path)

    def test_missing_event_log_is_empty(self):
        self.assertEqual(load_events(self.dir / "none.log"), [])

    def test_append_events(self):
        path = self.dir / "logs" / "feed.log"
        events = [
            ComicUrl("http://x/comic/1"),
            Read(datetime(2017, 7, 17, 3, 21, 21, 492180, tzinfo=pytz.utc)),
        ]

        self.assertEqual(append_events(path, events[:1]), 1)
        self.assertEqual(append_events(path, events[1:]), 1)
        self.assertEqual(append_events(path, []), 0)
        self.assertEqual(load_events(path), events)

    def test_append_after_unterminated_line(self):
        path = self.dir / "feed.log"
        path.write_text("<http://x/comic/1>", encoding="utf-8")

        append_events(path, [ComicUrl("http://x/comic/2")])
        self.assertEqual(load_events(path), [ComicUrl("http://x/comic/1"), ComicUrl("http://x/comic/2")])


if __name__ == "__main__":
    unittest.main()
