"""Module: xattr_reader.py

Date: 2026-10-18

Read raw extended attribute payloads.

A missing attribute is the normal case for most files and returns None. Any
other OSError (permissions, vanished file, I/O) raises
ExtendedAttributeReadError so the resolver can log it separately before
falling back.

Linux exposes os.getxattr. macOS does not, so there the reader calls libc
getxattr(2) through ctypes; its signature carries two extra arguments
(position, options).
"""

import ctypes
import ctypes.util
import errno
import os
import platform
from collections.abc import Callable

from dateprefix.core.errors import ExtendedAttributeReadError
from dateprefix.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# ENODATA on Linux, ENOATTR on BSD and macOS
_MISSING_ATTRIBUTE_ERRNOS = {
    code
    for code in (getattr(errno, "ENODATA", None), getattr(errno, "ENOATTR", None))
    if code is not None
}

# The filesystem or the attribute namespace does not support the name; on Linux
# names outside the user. namespace end up here.
_UNSUPPORTED_ERRNOS = {
    code
    for code in (getattr(errno, "ENOTSUP", None), getattr(errno, "EOPNOTSUPP", None))
    if code is not None
}


class LibcGetxattr:
    """os.getxattr(path, name) equivalent backed by the macOS libc call.

    Args:
        func: A callable with the C signature
            getxattr(path, name, value, size, position, options) -> ssize_t.
            Bound from libc on first use when omitted.
    """

    def __init__(self, func: Callable[..., int] | None = None):
        self._func = func

    @staticmethod
    def _bind() -> Callable[..., int]:
        libc = ctypes.CDLL(ctypes.util.find_library("c"), use_errno=True)
        func = libc.getxattr
        func.argtypes = [
            ctypes.c_char_p,
            ctypes.c_char_p,
            ctypes.c_void_p,
            ctypes.c_size_t,
            ctypes.c_uint32,
            ctypes.c_int,
        ]
        func.restype = ctypes.c_ssize_t
        return func

    def __call__(self, path: str, name: str) -> bytes:
        if self._func is None:
            self._func = self._bind()

        raw_path = os.fsencode(path)
        raw_name = name.encode("utf-8")

        # First call with no buffer returns the payload size
        size = self._func(raw_path, raw_name, None, 0, 0, 0)
        if size < 0:
            self._raise_errno(path)

        buffer = ctypes.create_string_buffer(size)
        read = self._func(raw_path, raw_name, buffer, size, 0, 0)
        if read < 0:
            self._raise_errno(path)
        return buffer.raw[:read]

    @staticmethod
    def _raise_errno(path: str) -> None:
        code = ctypes.get_errno()
        raise OSError(code, os.strerror(code), path)


def default_getxattr() -> Callable[[str, str], bytes] | None:
    """Getter for the running platform, None without extended attribute support."""
    if hasattr(os, "getxattr"):
        return os.getxattr
    if platform.system() == "Darwin":
        return LibcGetxattr()
    return None


class ExtendedAttributeReader:
    """Return the bytes stored under a named extended attribute.

    Args:
        getxattr: Callable with the signature of os.getxattr(path, name).
            Defaults to default_getxattr(); platforms without support report
            every attribute absent.
    """

    def __init__(self, getxattr: Callable[[str, str], bytes] | None = None):
        self._getxattr = getxattr if getxattr is not None else default_getxattr()
        if self._getxattr is None:
            logger.debug(
                "[ExtendedAttributeReader] No extended attribute support on this platform",
                extra={"dev_only": True},
            )

    @property
    def is_supported(self) -> bool:
        return self._getxattr is not None

    def read(self, attribute_name: str, file_path: str) -> bytes | None:
        """Read `attribute_name` of `file_path`.

        Returns:
            The raw payload, or None when the attribute does not exist.

        Raises:
            ExtendedAttributeReadError: the attribute could not be read.
        """
        if self._getxattr is None:
            return None

        try:
            payload = self._getxattr(file_path, attribute_name)
        except OSError as e:
            if e.errno in _MISSING_ATTRIBUTE_ERRNOS or e.errno in _UNSUPPORTED_ERRNOS:
                logger.debug(
                    "[ExtendedAttributeReader] %s not set on %s",
                    attribute_name,
                    file_path,
                    extra={"dev_only": True},
                )
                return None
            raise ExtendedAttributeReadError(
                attribute_name, file_path, e.strerror or str(e)
            ) from e

        return bytes(payload)
