"""Parsers for sdkmanager console output."""

from sdkmgr.parsers.listing import ListingParser, Section, parse_listing

__all__ = ["ListingParser", "Section", "parse_listing"]
