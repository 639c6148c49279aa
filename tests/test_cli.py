"""Tests for the feed-check command line."""

import tempfile
import unittest
from pathlib import Path

from feed_tracker.cli import main


class TestCli(unittest.TestCase):
    """Test cases for the feed-check entry point."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        self.config = self.dir / "feeds.conf"

    def tearDown(self):
        self.tmp.cleanup()

    def test_valid_config(self):
        self.config.write_text('"A" <http://a/> @ on monday @ keep title /x/\n', encoding="utf-8")
        self.assertEqual(main(["--config", str(self.config)]), 0)

    def test_invalid_config(self):
        self.config.write_text('"A" <http://a/> @ on someday\n', encoding="utf-8")
        with self.assertLogs(level="ERROR") as logs:
            self.assertEqual(main(["--config", str(self.config)]), 1)
        self.assertIn("a weekday expected at line 1", "\n".join(logs.output))

    def test_missing_config(self):
        self.assertEqual(main(["--config", str(self.dir / "missing.conf")]), 1)

    def test_event_logs(self):
        self.config.write_text('"A" <http://a/>\n', encoding="utf-8")
        good = self.dir / "good.log"
        good.write_text("<http://a/1>\nread 2017-07-17T03:21:21.492180+00:00\n", encoding="utf-8")
        bad = self.dir / "bad.log"
        bad.write_text("<http://a/1>\nnonsense\n", encoding="utf-8")

        self.assertEqual(main(["--config", str(self.config), "--events", str(good)]), 0)
        self.assertEqual(main(["--config", str(self.config), "--events", str(good), str(bad)]), 1)


if __name__ == "__main__":
    unittest.main()
