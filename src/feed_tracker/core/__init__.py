"""Parsing engine for the feed configuration and event log formats."""
