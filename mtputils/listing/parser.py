"""Parser for the text listing captured with ``mtp-files``."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mtputils.errors import MissingListingError
from mtputils.listing.models import FileRecord, ListingIndex

logger = logging.getLogger(__name__)

FILE_ID_PATTERN = re.compile(r"^File ID: (\d+)")
FILENAME_PATTERN = re.compile(r"^\s+Filename: (.+)")
FILE_SIZE_PATTERN = re.compile(r"^\s+File size (\d+)")
PARENT_ID_PATTERN = re.compile(r"^\s+Parent ID: (\d+)")


class ParserState(Enum):
    OUTSIDE_RECORD = "outside_record"
    IN_RECORD = "in_record"


@dataclass
class _ListingBuilder:
    """Accumulates records during a single parse."""

    index: ListingIndex = field(default_factory=ListingIndex)
    state: ParserState = ParserState.OUTSIDE_RECORD
    current: dict = field(default_factory=dict)

    def start_record(self, file_id: int) -> None:
        self.flush()
        self.current = {"id": file_id}
        self.state = ParserState.IN_RECORD

    def set_field(self, key: str, value: str | int) -> None:
        self.current[key] = value

    def flush(self) -> None:
        if self.state is ParserState.IN_RECORD:
            self._add(FileRecord(**self.current))
        self.current = {}
        self.state = ParserState.OUTSIDE_RECORD

    def _add(self, record: FileRecord) -> None:
        by_id = self.index.by_id
        by_name = self.index.by_name

        previous = by_id.get(record.id)
        by_id[record.id] = record
        if previous is not None:
            if previous.name == record.name:
                return
            bucket = by_name[previous.name]
            bucket.remove(record.id)
            if not bucket:
                del by_name[previous.name]

        by_name.setdefault(record.name, []).append(record.id)


def parse_lines(lines: Iterable[str]) -> ListingIndex:
    """Parse listing lines into a ListingIndex.

    A ``File ID:`` line starts a new record. Indented ``Filename:``,
    ``File size`` and ``Parent ID:`` lines fill in the open record, and
    anything else is ignored. The record still open at the end is kept.
    """
    builder = _ListingBuilder()

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")

        if match := FILE_ID_PATTERN.match(line):
            builder.start_record(int(match.group(1)))
            continue

        if builder.state is ParserState.OUTSIDE_RECORD:
            continue

        if match := FILENAME_PATTERN.match(line):
            builder.set_field("name", match.group(1))
        elif match := FILE_SIZE_PATTERN.match(line):
            builder.set_field("size", int(match.group(1)))
        elif match := PARENT_ID_PATTERN.match(line):
            builder.set_field("parent_id", int(match.group(1)))

    builder.flush()
    return builder.index


def parse_listing(listing_path: Path, capture_command: str = "mtp-files") -> ListingIndex:
    """Read and parse a captured listing file.

    Raises:
        MissingListingError: If the listing file does not exist.
        OSError: If the file exists but cannot be read.
    """
    listing_path = Path(listing_path)
    if not listing_path.exists():
        raise MissingListingError(
            f"No {listing_path.name} present, please create it first using "
            f"'{capture_command} > {listing_path.name}'"
        )

    with listing_path.open(encoding="utf-8", errors="replace") as f:
        index = parse_lines(f)

    logger.debug("Parsed %d files from %s", len(index), listing_path)
    return index
