"""Configuration module for mtputils."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Config:
    listing_path: Path = field(default_factory=lambda: Path("mtp-files.out"))
    capture_command: str = "mtp-files"
    getfile_command: str = "mtp-getfile"
