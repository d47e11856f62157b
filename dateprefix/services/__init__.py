"""Services package.

Filesystem access and the protocols the core depends on.
"""

from dateprefix.services.filesystem_service import FilesystemService
from dateprefix.services.interfaces import (
    AttributeReaderProtocol,
    CreationTimeSourceProtocol,
)

__all__ = [
    "AttributeReaderProtocol",
    "CreationTimeSourceProtocol",
    "FilesystemService",
]
