"""Module: bplist_decoder.py

Date: 2026-10-18

Decoder for the timestamp stored in Photos extended attributes.

The attributes hold a binary property list (``bplist00``) whose root object is
a single real or date. Only the part of the format needed to reach that root
object is implemented:

    +---------+----------------+--------------+--------------------+
    | header  | object table   | offset table | trailer (32 bytes) |
    | 8 bytes | tagged objects | N entries    |                    |
    +---------+----------------+--------------+--------------------+

Trailer layout (big-endian): 6 unused bytes, offset entry width, object
reference width, object count (u64), root object index (u64), offset table
start (u64).

Each object starts with a marker byte: the high nibble is the type, the low
nibble a size hint. Reals are ``0x2n`` followed by ``2**n`` bytes, dates are
``0x33`` followed by an 8-byte double. Both count seconds from
2001-01-01T00:00:00Z.
"""

import math
import struct

from dateprefix.core.errors import BplistDecodeError

HEADER_MAGIC = b"bplist"
HEADER_SIZE = 8

_TRAILER = struct.Struct(">6xBBQQQ")
TRAILER_SIZE = _TRAILER.size  # 32

MIN_PAYLOAD_SIZE = HEADER_SIZE + TRAILER_SIZE

MARKER_REAL = 0x2
MARKER_DATE = 0x33

_REAL_FORMATS = {
    4: struct.Struct(">f"),
    8: struct.Struct(">d"),
}
_DATE_FORMAT = struct.Struct(">d")

_TYPE_NAMES = {
    0x0: "singleton",
    0x1: "integer",
    0x2: "real",
    0x3: "date",
    0x4: "data",
    0x5: "ascii string",
    0x6: "utf-16 string",
    0x8: "uid",
    0xA: "array",
    0xC: "set",
    0xD: "dict",
}


def describe_marker(marker: int) -> str:
    """Human-readable object type for a marker byte."""
    return _TYPE_NAMES.get(marker >> 4, f"unknown (0x{marker:02x})")


class BinaryPlistTimestampDecoder:
    """Extract the real/date root value of a binary plist.

    Usage:
        decoder = BinaryPlistTimestampDecoder()
        seconds_since_2001 = decoder.decode(payload)
    """

    def decode(self, payload: bytes) -> float:
        """Decode the root object of `payload` as a timestamp.

        Args:
            payload: The complete binary plist, in memory.

        Returns:
            float: Seconds relative to 2001-01-01T00:00:00Z.

        Raises:
            BplistDecodeError: The payload is malformed, truncated, or its
                root object is neither a real nor a date.
        """
        data = bytes(payload)

        if len(data) < MIN_PAYLOAD_SIZE:
            raise BplistDecodeError(
                f"Payload too short: {len(data)} bytes, need at least {MIN_PAYLOAD_SIZE}"
            )
        if not data.startswith(HEADER_MAGIC):
            raise BplistDecodeError(f"Bad header magic: {data[:HEADER_SIZE]!r}")

        trailer_start = len(data) - TRAILER_SIZE
        offset_size, _ref_size, num_objects, root_index, table_offset = _TRAILER.unpack_from(
            data, trailer_start
        )

        if not 1 <= offset_size <= 8:
            raise BplistDecodeError(f"Invalid offset entry width: {offset_size}")
        if num_objects == 0:
            raise BplistDecodeError("Object count is zero")
        if root_index >= num_objects:
            raise BplistDecodeError(
                f"Root object index {root_index} out of range ({num_objects} objects)"
            )

        table_end = table_offset + num_objects * offset_size
        if table_offset < HEADER_SIZE or table_end > trailer_start:
            raise BplistDecodeError(
                f"Offset table [{table_offset}, {table_end}) outside payload"
            )

        entry_start = table_offset + root_index * offset_size
        object_offset = int.from_bytes(data[entry_start : entry_start + offset_size], "big")
        if not HEADER_SIZE <= object_offset < table_offset:
            raise BplistDecodeError(f"Root object offset {object_offset} outside object table")

        return self._read_timestamp(data, object_offset, table_offset)

    def _read_timestamp(self, data: bytes, offset: int, limit: int) -> float:
        """Read a real or date object at `offset`; objects end before `limit`."""
        marker = data[offset]

        if marker == MARKER_DATE:
            fmt = _DATE_FORMAT
        elif marker >> 4 == MARKER_REAL:
            width = 1 << (marker & 0x0F)
            fmt = _REAL_FORMATS.get(width)
            if fmt is None:
                raise BplistDecodeError(f"Unsupported real width: {width} bytes")
        else:
            raise BplistDecodeError(
                f"Root object is {describe_marker(marker)}, expected real or date"
            )

        value_start = offset + 1
        if value_start + fmt.size > limit:
            raise BplistDecodeError("Root object truncated")

        (value,) = fmt.unpack_from(data, value_start)
        if not math.isfinite(value):
            raise BplistDecodeError(f"Non-finite timestamp: {value}")

        return float(value)

