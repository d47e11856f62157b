"""Module: workers.py

Date: 2026-10-18

Background workers for the two phases of a pass.

AnalysisWorker resolves a date for every file and builds the RenamePlan.
RenameWorker applies a plan with the BatchRenamer. Each works through its
files sequentially on a single thread and reports one progress event per
file.

Usage:
    worker = AnalysisWorker(directory, names)
    worker.progress_updated.connect(on_progress)
    worker.start()
    worker.wait()
    plan = worker.result
"""

from collections.abc import Sequence

from dateprefix.core.metadata.creation_date_resolver import CreationDateResolver
from dateprefix.core.rename.data_classes import ExecutionResult, RenamePlan
from dateprefix.core.rename.execution_manager import BatchRenamer
from dateprefix.core.rename.planner import RenamePlanner
from dateprefix.models.file_entry import FileEntry
from dateprefix.utils.logging.logger_factory import get_cached_logger
from dateprefix.utils.threading import WorkerBase

logger = get_cached_logger(__name__)


class AnalysisWorker(WorkerBase):
    """Resolve creation dates for a directory snapshot and plan the renames."""

    def __init__(
        self,
        directory: str,
        names: Sequence[str],
        resolver: CreationDateResolver | None = None,
        planner: RenamePlanner | None = None,
    ) -> None:
        super().__init__(name="AnalysisWorker")
        self.directory = directory
        self.names = list(names)
        self.resolver = resolver or CreationDateResolver()
        self.planner = planner or RenamePlanner()
        self.entries: list[FileEntry] = []

    def process(self) -> RenamePlan:
        entries = FileEntry.from_listing(self.directory, self.names)
        total = len(entries)
        logger.info("[AnalysisWorker] Analysing %d files in %s", total, self.directory)
        self.status_updated.emit(f"Analysing {total} files")

        for index, entry in enumerate(entries, start=1):
            entry.resolved_date, entry.date_source = self.resolver.resolve_with_source(
                entry.full_path
            )
            self.progress_updated.emit(index, total, entry.name)

        self.entries = entries
        logger.info(
            "[AnalysisWorker] Resolved %d of %d dates",
            sum(1 for entry in entries if entry.is_resolved),
            total,
        )
        return self.planner.plan_entries(entries)


class RenameWorker(WorkerBase):
    """Apply a RenamePlan, relaying per-entry progress."""

    def __init__(
        self,
        directory: str,
        plan: RenamePlan,
        renamer: BatchRenamer | None = None,
    ) -> None:
        super().__init__(name="RenameWorker")
        self.directory = directory
        self.plan = plan
        self.renamer = renamer or BatchRenamer()

    def process(self) -> ExecutionResult:
        logger.info(
            "[RenameWorker] Renaming %d of %d files in %s",
            self.plan.rename_count,
            len(self.plan),
            self.directory,
        )
        self.status_updated.emit(f"Renaming {self.plan.rename_count} files")
        return self.renamer.apply(self.plan, self.directory, self.progress_updated.emit)
