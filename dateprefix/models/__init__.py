"""Data models."""

from dateprefix.models.file_entry import FileEntry

__all__ = ["FileEntry"]
