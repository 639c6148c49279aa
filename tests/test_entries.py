"""Tests for filtering fetched feed entries."""

import unittest
from datetime import datetime

import pytz

from feed_tracker.core.entries import apply_filters, fetch_entries, new_entries
from feed_tracker.models.feed import (
    ComicUrl,
    Every,
    FeedInfo,
    Filter,
    FilterType,
    Read,
)

RSS = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0">
  <channel>
    <title>El Goonish Shive</title>
    <link>http://www.egscomics.com/</link>
    <description>Comics</description>
    <item>
      <title>EGS:NP 2017-07-16</title>
      <link>http://www.egscomics.com/egsnp/2017-07-16</link>
    </item>
    <item>
      <title>Comic for 2017-07-17</title>
      <link>http://www.egscomics.com/comic/2017-07-17</link>
    </item>
    <item>
      <title>Sketchbook</title>
      <link>http://www.egscomics.com/sketchbook/42</link>
    </item>
  </channel>
</rss>
"""


class TestEntries(unittest.TestCase):
    """Test cases for fetching and filtering feed entries."""

    def setUp(self):
        self.feed = FeedInfo("El Goonish Shive", "http://www.egscomics.com/rss.php")
        self.entries = fetch_entries(self.feed, source=RSS)

    def links(self, entries):
        return [entry.get("link") for entry in entries]

    def test_fetch_entries(self):
        self.assertEqual(len(self.entries), 3)
        self.assertEqual(self.entries[1].get("title"), "Comic for 2017-07-17")

    def test_no_filters_keeps_everything(self):
        self.assertEqual(apply_filters([Every(3)], self.entries), self.entries)

    def test_ignore_title(self):
        kept = apply_filters([Filter(FilterType.IGNORE_TITLE, "EGS:NP")], self.entries)
        self.assertEqual(self.links(kept), [
            "http://www.egscomics.com/comic/2017-07-17",
            "http://www.egscomics.com/sketchbook/42",
        ])

    def test_keep_title(self):
        kept = apply_filters([Filter(FilterType.KEEP_TITLE, r"\d{4}-\d{2}-\d{2}")], self.entries)
        self.assertEqual(len(kept), 2)

    def test_keep_and_ignore(self):
        policies = {
            Filter(FilterType.KEEP_TITLE, r"\d{4}-\d{2}-\d{2}"),
            Filter(FilterType.IGNORE_URL, "egsnp"),
        }
        kept = apply_filters(policies, self.entries)
        self.assertEqual(self.links(kept), ["http://www.egscomics.com/comic/2017-07-17"])

    def test_any_keep_filter_is_enough(self):
        policies = [
            Filter(FilterType.KEEP_URL, "sketchbook"),
            Filter(FilterType.KEEP_URL, "/comic/"),
        ]
        self.assertEqual(len(apply_filters(policies, self.entries)), 2)

    def test_new_entries(self):
        events = [
            ComicUrl("http://www.egscomics.com/egsnp/2017-07-16"),
            Read(datetime(2017, 7, 17, tzinfo=pytz.utc)),
        ]
        fresh = new_entries(self.entries, events)
        self.assertEqual(self.links(fresh), [
            "http://www.egscomics.com/comic/2017-07-17",
            "http://www.egscomics.com/sketchbook/42",
        ])


if __name__ == "__main__":
    unittest.main()
