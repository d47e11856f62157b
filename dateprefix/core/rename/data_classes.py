"""dateprefix.core.rename.data_classes.

Data classes for the rename workflow.

Lightweight containers for the rename plan produced by the planner and the
execution result produced by the batch renamer.

Date: 2026-10-18
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PlanEntry:
    """Planned target for a single file.

    Attributes:
        original_name: Current filename.
        target_name: Filename after the rename. Equal to `original_name` when
            the file already carries its date prefix, None when the date
            could not be resolved.
        resolved_date: Date the target was computed from.
        is_conflict: True when another entry ends up with the same name; the
            rename is shown but never executed.

    """

    original_name: str
    target_name: str | None
    resolved_date: datetime | None = None
    is_conflict: bool = False

    @property
    def is_unresolved(self) -> bool:
        return self.target_name is None

    @property
    def is_unchanged(self) -> bool:
        return self.target_name == self.original_name

    @property
    def needs_rename(self) -> bool:
        """True when executing this entry moves a file."""
        return not self.is_unresolved and not self.is_unchanged and not self.is_conflict

    @property
    def final_name(self) -> str:
        """Name the file has once the plan is applied (ignoring conflicts)."""
        return self.target_name if self.target_name is not None else self.original_name


@dataclass
class RenamePlan:
    """Ordered rename plan, one entry per input file.

    Attributes:
        entries: Plan entries in input order.
        unresolved_count: Entries without a target (computed).
        unchanged_count: Entries whose target equals the original (computed).
        conflict_count: Entries flagged as conflicts (computed).
        rename_count: Entries that will move a file (computed).

    """

    entries: list[PlanEntry] = field(default_factory=list)
    unresolved_count: int = field(default=0, compare=False)
    unchanged_count: int = field(default=0, compare=False)
    conflict_count: int = field(default=0, compare=False)
    rename_count: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        """Compute counters from entries."""
        self.unresolved_count = sum(1 for e in self.entries if e.is_unresolved)
        self.unchanged_count = sum(1 for e in self.entries if e.is_unchanged)
        self.conflict_count = sum(1 for e in self.entries if e.is_conflict)
        self.rename_count = sum(1 for e in self.entries if e.needs_rename)

    @property
    def name_pairs(self) -> list[tuple[str, str | None]]:
        """(original name, target name or None) pairs for display."""
        return [(e.original_name, e.target_name) for e in self.entries]

    @property
    def has_changes(self) -> bool:
        return self.rename_count > 0

    def get(self, original_name: str) -> PlanEntry | None:
        for entry in self.entries:
            if entry.original_name == original_name:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PlanEntry]:
        return iter(self.entries)


@dataclass
class ExecutionItem:
    """Outcome of one plan entry.

    Attributes:
        original_name: Filename before the batch.
        target_name: Planned filename, None for unresolved entries.
        success: True when the file was renamed.
        error_message: Why the rename failed, empty otherwise.
        skip_reason: "unresolved", "unchanged" or "conflict" when no rename
            was attempted.

    """

    original_name: str
    target_name: str | None
    success: bool = False
    error_message: str = ""
    skip_reason: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error_message)


@dataclass
class ExecutionResult:
    """Summary of a batch rename.

    Attributes:
        items: One ExecutionItem per plan entry, in plan order.
        success_count: Files renamed (computed).
        error_count: Renames that failed (computed).
        skipped_count: Entries skipped without an attempt (computed).

    """

    items: list[ExecutionItem] = field(default_factory=list)
    success_count: int = 0
    error_count: int = 0
    skipped_count: int = 0

    def __post_init__(self) -> None:
        """Compute success, error and skipped counts from items."""
        self.success_count = sum(1 for item in self.items if item.success)
        self.error_count = sum(1 for item in self.items if item.failed)
        self.skipped_count = sum(1 for item in self.items if item.skip_reason)

    @property
    def processed_count(self) -> int:
        return len(self.items)

    @property
    def failed_items(self) -> list[ExecutionItem]:
        return [item for item in self.items if item.failed]
