"""Data models for the parsed file listing."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileRecord:
    """One file entry from the captured listing."""

    id: int
    name: str = ""
    size: int | None = None
    parent_id: int | None = None


@dataclass
class ListingIndex:
    """Files indexed by id and by name.

    ``by_name`` maps each name to its ids in snapshot order. Names are not
    unique on a device, so one name can hold several ids.
    """

    by_id: dict[int, FileRecord] = field(default_factory=dict)
    by_name: dict[str, list[int]] = field(default_factory=dict)

    def names(self) -> list[str]:
        return sorted(self.by_name)

    def records(self) -> list[FileRecord]:
        """All records, grouped by name in lexicographic order."""
        return [self.by_id[file_id] for name in self.names() for file_id in self.by_name[name]]

    def __len__(self) -> int:
        return len(self.by_id)

    def __contains__(self, file_id: object) -> bool:
        return file_id in self.by_id
