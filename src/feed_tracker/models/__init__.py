"""Typed values produced by the feed_tracker parsers."""
