"""mtp-getfile wrapper for retrieving files from the device."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from mtputils.errors import GetfileNotFoundError
from mtputils.listing.models import FileRecord


@dataclass
class GetfileResult:
    """Result from a single mtp-getfile call."""

    record: FileRecord
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GetfileRunner:
    """Wrapper for mtp-getfile command execution."""

    def __init__(self, command: str = "mtp-getfile") -> None:
        self.command = command

    def check(self) -> None:
        if not shutil.which(self.command):
            raise GetfileNotFoundError(
                f"{self.command} is required but not found.\n"
                "Please install mtp-tools from libmtp: http://libmtp.sourceforge.net"
            )

    def fetch(self, record: FileRecord, destination: Path) -> GetfileResult:
        """Copy one file from the device to ``destination``."""
        cmd = [self.command, str(record.id), str(destination)]

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            return GetfileResult(record, str(e))

        if result.returncode != 0:
            error = result.stderr.strip() or f"{self.command} exited with status {result.returncode}"
            return GetfileResult(record, error)

        return GetfileResult(record)
