"""Module: session.py

Date: 2026-10-18

State of one directory pass, as seen by a presentation layer.

RenameSession starts the analysis and rename workers and mirrors their
progress into plain attributes (plan, in-progress flags, processed/total)
that a view can poll or observe through `state_changed`. Only the active
worker writes these attributes, and a phase cannot start while another is
running, so there is never more than one writer.
"""

from collections.abc import Sequence
from functools import partial

from dateprefix.core.errors import DatePrefixError, SessionBusyError
from dateprefix.core.metadata.creation_date_resolver import CreationDateResolver
from dateprefix.core.rename.data_classes import ExecutionResult, RenamePlan
from dateprefix.core.rename.execution_manager import BatchRenamer, ProgressCallback
from dateprefix.core.rename.planner import RenamePlanner
from dateprefix.core.workers import AnalysisWorker, RenameWorker
from dateprefix.models.file_entry import FileEntry
from dateprefix.utils.events import Observable, Signal
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class RenameSession(Observable):
    """Analysis and rename phases for a single directory.

    Signals:
        state_changed(): emitted from the worker thread whenever a flag, a
            counter or the plan changes.
    """

    state_changed = Signal()

    def __init__(
        self,
        resolver: CreationDateResolver | None = None,
        planner: RenamePlanner | None = None,
        renamer: BatchRenamer | None = None,
    ) -> None:
        super().__init__()
        self._resolver = resolver or CreationDateResolver()
        self._planner = planner or RenamePlanner()
        self._renamer = renamer or BatchRenamer()

        self.directory: str | None = None
        self.entries: list[FileEntry] = []
        self.plan: RenamePlan | None = None
        self.last_result: ExecutionResult | None = None

        self.is_analysing = False
        self.is_renaming = False
        self.processed = 0
        self.total = 0

    @property
    def is_busy(self) -> bool:
        return self.is_analysing or self.is_renaming

    @property
    def name_pairs(self) -> list[tuple[str, str | None]]:
        """(original, target or None) pairs of the current plan."""
        return self.plan.name_pairs if self.plan is not None else []

    @property
    def progress(self) -> tuple[int, int]:
        """(processed, total) of the running or last rename phase."""
        return self.processed, self.total

    def start_analysis(self, directory: str, names: Sequence[str]) -> AnalysisWorker:
        """Analyse `names` in `directory` on a background worker.

        Raises:
            SessionBusyError: a phase is already running.
        """
        self._ensure_idle("analysis")

        self.directory = directory
        self.entries = []
        self.plan = None
        self.last_result = None
        self.processed = 0
        self.total = 0
        self.is_analysing = True
        self.state_changed.emit()

        worker = AnalysisWorker(directory, names, self._resolver, self._planner)
        worker.finished_processing.connect(partial(self._on_analysis_finished, worker))
        worker.start()
        return worker

    def start_rename(self, progress_callback: ProgressCallback | None = None) -> RenameWorker:
        """Apply the current plan on a background worker.

        Args:
            progress_callback: Connected to the worker before it starts;
                receives (processed, total, original_name).

        Raises:
            SessionBusyError: a phase is already running.
            DatePrefixError: no plan is available yet.
        """
        self._ensure_idle("rename")
        if self.plan is None or self.directory is None:
            raise DatePrefixError("Nothing to rename: run the analysis first")

        self.last_result = None
        self.processed = 0
        self.total = len(self.plan)
        self.is_renaming = True
        self.state_changed.emit()

        worker = RenameWorker(self.directory, self.plan, self._renamer)
        worker.progress_updated.connect(self._on_rename_progress)
        if progress_callback is not None:
            worker.progress_updated.connect(progress_callback)
        worker.finished_processing.connect(self._on_rename_finished)
        worker.start()
        return worker

    def _ensure_idle(self, phase: str) -> None:
        if self.is_busy:
            raise SessionBusyError(f"Cannot start {phase} while another phase is running")

    def _on_analysis_finished(self, worker: AnalysisWorker, success: bool, plan: object) -> None:
        if success:
            self.entries = worker.entries
            self.plan = plan
        else:
            logger.error("[RenameSession] Analysis of %s failed", self.directory)
        self.is_analysing = False
        self.state_changed.emit()

    def _on_rename_progress(self, processed: int, total: int, _name: str) -> None:
        self.processed = processed
        self.total = total
        self.state_changed.emit()

    def _on_rename_finished(self, success: bool, result: object) -> None:
        if success:
            self.last_result = result
        else:
            logger.error("[RenameSession] Rename of %s failed", self.directory)
        self.is_renaming = False
        self.state_changed.emit()
