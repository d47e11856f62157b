"""Logging utilities package.

Logger factory, unicode-safe helpers and root logger setup.
"""

from dateprefix.utils.logging.logger_factory import get_cached_logger

__all__ = [
    "get_cached_logger",
]
