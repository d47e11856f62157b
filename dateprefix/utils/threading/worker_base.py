"""Module: worker_base.py

Date: 2026-10-18

Base class for the analysis and rename workers.

Each worker is one unit of work on its own thread: it writes its outcome to
`result` and announces it through `finished_processing`. Callers either
connect to the signals or `wait()` and read `result`.
"""

import threading
from abc import abstractmethod
from typing import Any

from dateprefix.utils.events import Observable, Signal
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class WorkerBase(threading.Thread, Observable):
    """Thread with QThread-style helpers and observer signals.

    Signals:
        progress_updated(current, total, info): one event per item processed.
        status_updated(message): free-form status text.
        finished_processing(success, result): emitted once when work ends.
    """

    progress_updated = Signal(int, int, str)
    status_updated = Signal(str)
    finished_processing = Signal(bool, object)

    def __init__(self, name: str | None = None, daemon: bool = True) -> None:
        threading.Thread.__init__(self, name=name, daemon=daemon)
        Observable.__init__(self)
        self.result: Any = None
        self.error: BaseException | None = None

    def run(self) -> None:
        """Run `process()` and emit finished_processing with its outcome."""
        worker_name = self.__class__.__name__
        logger.debug("[%s] Started", worker_name, extra={"dev_only": True})
        try:
            self.result = self.process()
        except Exception as e:
            self.error = e
            logger.exception("[%s] Worker failed", worker_name)
            self.finished_processing.emit(False, None)
            return

        logger.debug("[%s] Finished", worker_name, extra={"dev_only": True})
        self.finished_processing.emit(True, self.result)

    @abstractmethod
    def process(self) -> Any:
        """Do the work on the worker thread and return the result."""
        ...

    def isRunning(self) -> bool:
        """True while the thread is alive (QThread naming)."""
        return self.is_alive()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the worker finishes.

        Args:
            timeout: Seconds to wait, None to wait forever.

        Returns:
            True if the thread finished, False on timeout.
        """
        self.join(timeout=timeout)
        return not self.isRunning()
