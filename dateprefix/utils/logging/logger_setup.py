"""Module: logger_setup.py

Date: 2026-10-18

Root logger configuration for the command-line shell.

ConfigureLogger sends INFO and higher to the console, errors to a rotating
log file and, when enabled, everything down to DEBUG to a separate debug file.
Levels, sizes and backup counts come from dateprefix.config.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from dateprefix.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from dateprefix.utils.logging.logger_helper import DevOnlyFilter

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> RotatingFileHandler:
    """Attach a rotating UTF-8 file handler to `logger`.

    Args:
        logger (logging.Logger): Logger receiving the handler.
        log_path (str): Path of the log file; parent folders are created.
        level (int): Minimum level written to this file.
        max_bytes (int): Size at which the file is rotated.
        backup_count (int): Number of rotated files kept.

    Returns:
        RotatingFileHandler: The handler that was added.
    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


class ConfigureLogger:
    """Configure the root logger once per process.

    Calling it again when the root logger already has handlers is a no-op, so
    test runners and embedding applications keep their own setup.
    """

    def __init__(
        self,
        log_name: str = "dateprefix",
        log_dir: str | None = None,
        console_level: str | int | None = None,
        log_to_file: bool | None = None,
    ):
        """
        Args:
            log_name (str): Base name for the log files.
            log_dir (str | None): Folder for log files; None disables file logging.
            console_level (str | int | None): Override for LOG_CONSOLE_LEVEL.
            log_to_file (bool | None): Override for LOG_TO_FILE.
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers do the filtering

        if self.logger.handlers:
            return

        if console_level is None:
            console_level = LOG_CONSOLE_LEVEL
        if isinstance(console_level, str):
            console_level = getattr(logging, console_level.upper(), logging.INFO)

        file_enabled = LOG_TO_FILE if log_to_file is None else log_to_file

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if file_enabled and log_dir:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.ERROR),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )
            if LOG_DEBUG_FILE_ENABLED:
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                    level=logging.DEBUG,
                    max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
                )

    def _setup_console_handler(self, level: int) -> None:
        """Console handler on stderr with the dev-only filter attached."""
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.logger.addHandler(console_handler)
