"""Module: logger_factory.py

Date: 2026-10-18

Thread-safe logger cache. Workers and the planner call get_cached_logger at
import time from several threads, so lookups go through a single lock.
"""

import logging
import threading

from dateprefix.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Hand out one patched logger per module name."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str = None) -> logging.Logger:
        """Get or create the cached logger for `name`.

        Args:
            name: Logger name, typically __name__ of the calling module.

        Returns:
            logging.Logger: Cached logger instance.
        """
        name = name or "dateprefix"

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)

            return cls._loggers[name]


def get_cached_logger(name: str = None) -> logging.Logger:
    """Shortcut for LoggerFactory.get_logger."""
    return LoggerFactory.get_logger(name)
