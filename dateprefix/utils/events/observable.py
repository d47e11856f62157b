"""Module: observable.py

Date: 2026-10-18

Minimal observer pattern with a Qt-like connect/disconnect/emit interface.

Workers declare their events as class attributes:

    class RenameWorker(WorkerBase):
        progress_updated = Signal(int, int, str)

    worker.progress_updated.connect(on_progress)
    worker.progress_updated.emit(1, 10, "IMG_01.jpg")

Callbacks run synchronously on the emitting thread. A callback that raises is
logged and does not stop delivery to the remaining callbacks.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor that gives each owning instance its own SignalInstance."""

    def __init__(self, *arg_types: type):
        """
        Args:
            *arg_types: Argument types, for documentation only.
        """
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Per-object signal holding the connected callbacks."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect `callback`; connecting the same callable twice is a no-op."""
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)
                logger.debug(
                    "Signal connected: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                    extra={"dev_only": True},
                )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect `callback`, or every callback when None."""
        with self._lock:
            if callback is None:
                self._callbacks.clear()
            elif callback in self._callbacks:
                self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        """Call every connected callback with `args`."""
        # Snapshot under lock, call outside it
        with self._lock:
            callbacks = self._callbacks.copy()

        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )


class Observable:
    """Marker base class for objects that declare Signal attributes."""

    def __init__(self) -> None:
        super().__init__()
