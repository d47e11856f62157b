"""Service protocol definitions.

Date: 2026-10-18

The resolver depends on these protocols rather than on concrete classes, so
tests can pass small fakes:

    class FakeAttributes:
        def read(self, attribute_name: str, file_path: str) -> bytes | None:
            return None

    resolver = CreationDateResolver(attribute_reader=FakeAttributes())
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "AttributeReaderProtocol",
    "CreationTimeSourceProtocol",
]


@runtime_checkable
class AttributeReaderProtocol(Protocol):
    """Reads raw extended attribute payloads."""

    def read(self, attribute_name: str, file_path: str) -> bytes | None:
        """Return the payload, None when absent; raise on read failure."""
        ...


@runtime_checkable
class CreationTimeSourceProtocol(Protocol):
    """Supplies the filesystem's native creation timestamp."""

    def get_creation_time(self, file_path: str) -> float | None:
        """Unix timestamp of file creation, or None when unavailable."""
        ...
