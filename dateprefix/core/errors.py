"""Module: errors.py

Date: 2026-10-18

Exception types raised by the core.

Only misuse of the session propagates to callers. Attribute read failures and
decode errors are caught by the resolver; rename failures are recorded per
entry in the execution result.
"""


class DatePrefixError(Exception):
    """Base class for dateprefix errors."""


class ExtendedAttributeReadError(DatePrefixError):
    """An extended attribute exists (or may exist) but could not be read."""

    def __init__(self, attribute_name: str, file_path: str, reason: str):
        super().__init__(f"Cannot read {attribute_name} of {file_path}: {reason}")
        self.attribute_name = attribute_name
        self.file_path = file_path
        self.reason = reason


class BplistDecodeError(DatePrefixError):
    """The payload is not a binary plist with a real or date root object."""


class SessionBusyError(DatePrefixError):
    """A phase was started while another phase is still running."""
