"""Filesystem access for the analysis phase.

Date: 2026-10-18

Provides the directory snapshot the planner works on and the native creation
timestamp used as the last date source.

Usage:
    from dateprefix.services.filesystem_service import FilesystemService

    service = FilesystemService()
    names = service.list_entries("/path/to/photos")
    created = service.get_creation_time("/path/to/photos/IMG_01.jpg")
"""

from __future__ import annotations

import os

from dateprefix.config import SKIP_HIDDEN_FILES
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class FilesystemService:
    """Directory listing and creation time lookup."""

    def list_entries(self, directory: str, skip_hidden: bool = SKIP_HIDDEN_FILES) -> list[str]:
        """List regular files of `directory` (not recursive), sorted by name.

        Args:
            directory: Folder to list.
            skip_hidden: Leave out names starting with a dot.

        Returns:
            Sorted file names; empty if the folder cannot be read.
        """
        try:
            with os.scandir(directory) as it:
                names = [
                    entry.name
                    for entry in it
                    if entry.is_file(follow_symlinks=False)
                    and not (skip_hidden and entry.name.startswith("."))
                ]
        except OSError as e:
            logger.error("Error listing directory %s: %s", directory, e)
            return []

        return sorted(names)

    def get_creation_time(self, file_path: str) -> float | None:
        """Return the file's creation time as a Unix timestamp.

        Uses st_birthtime where the platform reports it (macOS, BSD, recent
        Windows builds) and st_ctime on older Windows builds, where it is the
        creation time. Elsewhere st_ctime is the inode change time, so the
        creation time is reported as unavailable.

        Returns:
            The timestamp, or None when unavailable or the file cannot be read.
        """
        try:
            stat = os.stat(file_path)
        except OSError as e:
            logger.warning("Cannot stat %s: %s", file_path, e)
            return None

        birthtime = getattr(stat, "st_birthtime", None)
        if birthtime:
            return float(birthtime)

        if os.name == "nt":
            return float(stat.st_ctime)

        logger.debug(
            "[FilesystemService] No creation time available for %s",
            file_path,
            extra={"dev_only": True},
        )
        return None
