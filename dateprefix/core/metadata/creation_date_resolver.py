"""Module: creation_date_resolver.py

Date: 2026-10-18

Pick one authoritative creation date per file.

Sources, first success wins:
1. com.apple.assetsd.customCreationDate (binary plist, set when a date is
   edited in Photos)
2. com.apple.assetsd.addedDate (binary plist, import date in Photos)
3. the filesystem creation time, unless it falls on today's date

Files exported without metadata get a creation time of "now", so a same-day
filesystem date is treated as a placeholder and the file stays unresolved.
Errors in any step are logged and the next step is tried; resolve() only
ever returns a datetime or None.
"""

from collections.abc import Callable
from datetime import date, datetime

from dateprefix.config import DATE_ATTRIBUTE_ORDER, PLIST_EPOCH_OFFSET
from dateprefix.core.errors import BplistDecodeError, ExtendedAttributeReadError
from dateprefix.core.metadata.bplist_decoder import BinaryPlistTimestampDecoder
from dateprefix.core.metadata.xattr_reader import ExtendedAttributeReader
from dateprefix.services.filesystem_service import FilesystemService
from dateprefix.services.interfaces import (
    AttributeReaderProtocol,
    CreationTimeSourceProtocol,
)
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

SOURCE_FILESYSTEM = "filesystem"


class CreationDateResolver:
    """Resolve the original creation date of a file.

    Args:
        attribute_reader: Extended attribute reader (default: os.getxattr based).
        decoder: Binary plist timestamp decoder.
        filesystem: Source of the native creation timestamp.
        today: Callable returning the current local date; injectable for tests.
    """

    def __init__(
        self,
        attribute_reader: AttributeReaderProtocol | None = None,
        decoder: BinaryPlistTimestampDecoder | None = None,
        filesystem: CreationTimeSourceProtocol | None = None,
        today: Callable[[], date] | None = None,
    ):
        self._attributes = attribute_reader or ExtendedAttributeReader()
        self._decoder = decoder or BinaryPlistTimestampDecoder()
        self._filesystem = filesystem or FilesystemService()
        self._today = today or date.today

    def resolve(self, file_path: str) -> datetime | None:
        """Return the creation date of `file_path`, or None if unknown."""
        resolved, _source = self.resolve_with_source(file_path)
        return resolved

    def resolve_with_source(self, file_path: str) -> tuple[datetime | None, str | None]:
        """Like resolve(), also naming the step that produced the date.

        Returns:
            (date, source) where source is "custom_creation_date", "added_date"
            or "filesystem"; (None, None) when no step succeeded.
        """
        for source, attribute_name in DATE_ATTRIBUTE_ORDER:
            resolved = self._date_from_attribute(attribute_name, file_path)
            if resolved is not None:
                logger.debug(
                    "[CreationDateResolver] %s: %s from %s",
                    file_path,
                    resolved.isoformat(),
                    source,
                    extra={"dev_only": True},
                )
                return resolved, source

        resolved = self._date_from_filesystem(file_path)
        if resolved is not None:
            return resolved, SOURCE_FILESYSTEM

        logger.debug("[CreationDateResolver] %s: unresolved", file_path)
        return None, None

    def _date_from_attribute(self, attribute_name: str, file_path: str) -> datetime | None:
        try:
            payload = self._attributes.read(attribute_name, file_path)
        except ExtendedAttributeReadError as e:
            logger.warning("[CreationDateResolver] %s", e)
            return None
        except OSError as e:
            logger.warning(
                "[CreationDateResolver] Cannot read %s of %s: %s", attribute_name, file_path, e
            )
            return None

        if payload is None:
            return None

        try:
            seconds = self._decoder.decode(payload)
        except BplistDecodeError as e:
            logger.warning(
                "[CreationDateResolver] Cannot decode %s of %s: %s", attribute_name, file_path, e
            )
            return None

        return _local_datetime(seconds + PLIST_EPOCH_OFFSET, file_path)

    def _date_from_filesystem(self, file_path: str) -> datetime | None:
        try:
            timestamp = self._filesystem.get_creation_time(file_path)
        except OSError as e:
            logger.warning(
                "[CreationDateResolver] Cannot read creation time of %s: %s", file_path, e
            )
            return None

        if timestamp is None:
            return None

        created = _local_datetime(timestamp, file_path)
        if created is None:
            return None

        if created.date() == self._today():
            logger.debug(
                "[CreationDateResolver] Ignoring same-day creation time of %s",
                file_path,
            )
            return None

        return created


def _local_datetime(timestamp: float, file_path: str) -> datetime | None:
    """Unix timestamp to local naive datetime; None if out of range."""
    try:
        return datetime.fromtimestamp(timestamp)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning(
            "[CreationDateResolver] Timestamp %r of %s out of range: %s", timestamp, file_path, e
        )
        return None
