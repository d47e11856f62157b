"""Creation date sources: extended attributes, binary plists, resolver."""

from dateprefix.core.metadata.bplist_decoder import BinaryPlistTimestampDecoder
from dateprefix.core.metadata.creation_date_resolver import CreationDateResolver
from dateprefix.core.metadata.xattr_reader import ExtendedAttributeReader

__all__ = [
    "BinaryPlistTimestampDecoder",
    "CreationDateResolver",
    "ExtendedAttributeReader",
]
