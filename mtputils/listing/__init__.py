"""Parsing of captured device file listings."""

from .models import FileRecord, ListingIndex
from .parser import ParserState, parse_lines, parse_listing

__all__ = [
    "FileRecord",
    "ListingIndex",
    "ParserState",
    "parse_lines",
    "parse_listing",
]
