"""MTP utilities - query and fetch files listed in a captured mtp-files listing."""

__version__ = "0.1.0"

from mtputils.listing import FileRecord, ListingIndex, parse_listing
from mtputils.query import resolve

__all__ = ["FileRecord", "ListingIndex", "parse_listing", "resolve"]
