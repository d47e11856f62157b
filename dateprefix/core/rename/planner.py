"""dateprefix.core.rename.planner.

Compute `YYYYMMDD-<name>` targets from resolved creation dates.

The plan is a pure function of the names and their dates: planning again
without filesystem changes gives an identical plan, and a name that already
starts with its own date is left as it is.

Date: 2026-10-18
"""

from collections import Counter
from collections.abc import Callable, Sequence
from datetime import datetime

from dateprefix.config import DATE_PREFIX_FORMAT, DATE_PREFIX_SEPARATOR
from dateprefix.core.rename.data_classes import PlanEntry, RenamePlan
from dateprefix.models.file_entry import FileEntry
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def format_date_prefix(resolved: datetime) -> str:
    """8-digit YYYYMMDD form of `resolved`."""
    return resolved.strftime(DATE_PREFIX_FORMAT)


def target_name_for(name: str, resolved: datetime | None) -> str | None:
    """Target filename for `name`, None when the date is unknown."""
    if resolved is None:
        return None

    prefix = format_date_prefix(resolved)
    if name.startswith(prefix):
        return name
    return f"{prefix}{DATE_PREFIX_SEPARATOR}{name}"


class RenamePlanner:
    """Build a RenamePlan for a sorted list of unique filenames."""

    def plan(
        self,
        file_names: Sequence[str],
        date_of: Callable[[str], datetime | None],
    ) -> RenamePlan:
        """Plan targets for `file_names`, in the given order.

        Args:
            file_names: Unique filenames, already sorted.
            date_of: Returns the resolved date of a filename, or None.

        Returns:
            RenamePlan with one entry per name. Renames that would end on the
            same name as another entry are flagged as conflicts.
        """
        entries = []
        for name in file_names:
            resolved = date_of(name)
            entries.append(PlanEntry(name, target_name_for(name, resolved), resolved))

        self._flag_conflicts(entries)

        plan = RenamePlan(entries)
        logger.info(
            "[RenamePlanner] %d files: %d to rename, %d already named, %d unresolved, %d conflicts",
            len(plan),
            plan.rename_count,
            plan.unchanged_count,
            plan.unresolved_count,
            plan.conflict_count,
        )
        return plan

    def plan_entries(self, entries: Sequence[FileEntry]) -> RenamePlan:
        """Plan from analysed FileEntry objects and fill their planned_name."""
        dates = {entry.name: entry.resolved_date for entry in entries}
        plan = self.plan([entry.name for entry in entries], dates.get)

        for entry, plan_entry in zip(entries, plan.entries, strict=True):
            entry.planned_name = plan_entry.target_name

        return plan

    def _flag_conflicts(self, entries: list[PlanEntry]) -> None:
        """Flag renames whose target is the final name of more than one entry.

        Entries that keep their name are never flagged, so a file that is
        already correctly named always wins over a rename onto its name.
        """
        final_names = Counter(entry.final_name for entry in entries)

        for entry in entries:
            if entry.is_unresolved or entry.is_unchanged:
                continue
            if final_names[entry.target_name] > 1:
                entry.is_conflict = True
                logger.warning(
                    "[RenamePlanner] %s -> %s collides with another file, will be skipped",
                    entry.original_name,
                    entry.target_name,
                )
