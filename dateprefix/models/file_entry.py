"""
file_entry.py

Date: 2026-10-18

One file of a directory snapshot, as it moves through an analysis pass:
created from the listing, given a resolved date by the analysis worker and a
planned name by the planner. Entries are discarded after the pass.
"""

import os
from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class FileEntry:
    """A file name within `directory` plus its analysis results."""

    directory: str
    name: str

    # Filled by the analysis pass
    resolved_date: datetime | None = None
    date_source: str | None = None  # "custom_creation_date", "added_date", "filesystem"
    planned_name: str | None = None

    @classmethod
    def from_listing(cls, directory: str, names: list[str]) -> list["FileEntry"]:
        """Create entries for `names`, sorted lexicographically.

        Raises:
            ValueError: `names` contains duplicates.
        """
        if len(set(names)) != len(names):
            raise ValueError("Directory listing contains duplicate names")
        return [cls(directory=directory, name=name) for name in sorted(names)]

    @property
    def full_path(self) -> str:
        return os.path.join(self.directory, self.name)

    @property
    def is_resolved(self) -> bool:
        return self.resolved_date is not None

    @property
    def needs_rename(self) -> bool:
        """True when a planned name exists and differs from the current one."""
        return self.planned_name is not None and self.planned_name != self.name

    def __str__(self) -> str:
        return f"FileEntry({self.name})"
