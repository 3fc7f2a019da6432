"""Fetcher that retrieves resolved files one at a time."""

import logging
from dataclasses import dataclass
from pathlib import Path

from mtputils.errors import NoMatchError
from mtputils.fetch.getfile import GetfileRunner
from mtputils.listing.models import FileRecord

logger = logging.getLogger(__name__)


@dataclass
class FetchStats:
    """Statistics from a fetch run."""

    total: int = 0
    fetched: int = 0
    skipped: int = 0
    failed: int = 0


class Fetcher:
    """Retrieves files from the device, skipping ones already present locally."""

    def __init__(
        self,
        runner: GetfileRunner,
        overwrite: bool = False,
        dest_dir: Path | None = None,
    ) -> None:
        self.runner = runner
        self.overwrite = overwrite
        self.dest_dir = dest_dir or Path(".")

    def fetch_all(self, records: list[FileRecord]) -> FetchStats:
        """
        Fetch every record in order.

        A failure on one record is logged and counted, and the remaining
        records are still processed.

        Raises:
            NoMatchError: If there are no records to fetch.
            GetfileNotFoundError: If the retrieval command is not installed.
        """
        if not records:
            raise NoMatchError("No matching files to get")

        self.runner.check()

        stats = FetchStats(total=len(records))

        for i, record in enumerate(records, start=1):
            logger.info("[%d/%d] Getting file '%s' ...", i, stats.total, record.name)
            if not record.name:
                logger.warning("Skipped file %d (no filename in listing)", record.id)
                stats.skipped += 1
                continue

            destination = self.dest_dir / record.name

            if destination.is_file() and not self.overwrite:
                logger.warning(
                    "Skipped file '%s' (%d) (already exists)", record.name, record.id
                )
                stats.skipped += 1
                continue

            result = self.runner.fetch(record, destination)
            if result.ok:
                stats.fetched += 1
            else:
                logger.error("Failed to get file '%s' (%d): %s", record.name, record.id, result.error)
                stats.failed += 1

        return stats
