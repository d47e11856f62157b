"""dateprefix.core.rename.execution_manager.

Apply a RenamePlan to the filesystem.

Entries are processed strictly in plan order, one at a time. A failed rename
is recorded on its ExecutionItem and the batch moves on. Existing files are
never overwritten: a target that appears after planning fails that entry.

Date: 2026-10-18
"""

import errno
import os
from collections.abc import Callable

from dateprefix.core.rename.data_classes import (
    ExecutionItem,
    ExecutionResult,
    PlanEntry,
    RenamePlan,
)
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# (processed, total, original_name)
ProgressCallback = Callable[[int, int, str], None]

# os.link errors meaning "no hard links here" (FAT, exFAT, some network shares)
_LINK_UNSUPPORTED_ERRNOS = {
    code
    for code in (
        errno.EPERM,
        errno.EXDEV,
        errno.EMLINK,
        getattr(errno, "ENOTSUP", None),
        getattr(errno, "EOPNOTSUPP", None),
    )
    if code is not None
}


class BatchRenamer:
    """Execute rename plans sequentially with per-file failure tolerance."""

    def apply(
        self,
        plan: RenamePlan,
        directory: str,
        progress_callback: ProgressCallback | None = None,
    ) -> ExecutionResult:
        """Rename the files of `directory` according to `plan`.

        Args:
            plan: The plan to execute.
            directory: Folder holding every file named in the plan.
            progress_callback: Called after every entry, skipped ones
                included, with (processed, total, original_name).

        Returns:
            ExecutionResult with one item per plan entry.
        """
        total = len(plan)
        items = []

        for processed, entry in enumerate(plan, start=1):
            items.append(self._process_entry(entry, directory))
            if progress_callback is not None:
                progress_callback(processed, total, entry.original_name)

        result = ExecutionResult(items)
        logger.info(
            "[BatchRenamer] %d renamed, %d failed, %d skipped (of %d)",
            result.success_count,
            result.error_count,
            result.skipped_count,
            result.processed_count,
        )
        return result

    def _process_entry(self, entry: PlanEntry, directory: str) -> ExecutionItem:
        item = ExecutionItem(entry.original_name, entry.target_name)

        if entry.is_unresolved:
            item.skip_reason = "unresolved"
            return item
        if entry.is_unchanged:
            item.skip_reason = "unchanged"
            return item
        if entry.is_conflict:
            item.skip_reason = "conflict"
            return item

        old_path = os.path.join(directory, entry.original_name)
        new_path = os.path.join(directory, entry.target_name)

        try:
            self._rename(old_path, new_path)
        except OSError as e:
            item.error_message = e.strerror or str(e)
            logger.error(
                "[BatchRenamer] Rename failed for %s -> %s: %s",
                entry.original_name,
                entry.target_name,
                item.error_message,
            )
            return item

        item.success = True
        logger.debug(
            "[BatchRenamer] Renamed %s -> %s",
            entry.original_name,
            entry.target_name,
            extra={"dev_only": True},
        )
        return item

    def _rename(self, old_path: str, new_path: str) -> None:
        """Move `old_path` to `new_path`, failing if `new_path` exists.

        On POSIX os.rename replaces an existing target, so the move is a hard
        link (which fails with EEXIST) followed by removing the old name.
        Filesystems without hard links fall back to a checked os.rename.
        Windows os.rename already refuses existing targets.
        """
        if os.name == "nt":
            os.rename(old_path, new_path)
            return

        try:
            os.link(old_path, new_path)
        except OSError as e:
            if e.errno not in _LINK_UNSUPPORTED_ERRNOS:
                raise
            logger.debug(
                "[BatchRenamer] Hard links unsupported for %s, using rename",
                old_path,
                extra={"dev_only": True},
            )
            if os.path.lexists(new_path):
                raise FileExistsError(errno.EEXIST, "Target already exists", new_path) from e
            os.rename(old_path, new_path)
            return

        try:
            os.unlink(old_path)
        except OSError:
            os.unlink(new_path)
            raise
