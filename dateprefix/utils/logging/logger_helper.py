"""Module: logger_helper.py

Date: 2026-10-18

Helpers that keep log output working on consoles that cannot encode every
character a filename may contain.

Functions:
    safe_text(text): Swap troublesome Unicode punctuation for ASCII.
    safe_log(logger_func, message): Log, retrying with ASCII-safe text.
    get_logger(name): Named logger that propagates to root with safe methods.

DevOnlyFilter:
    Console filter that drops records tagged with extra={"dev_only": True}.
"""

import logging
import re
from functools import partial

from dateprefix.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "\u2192": "->",  # right arrow
    "\u2014": "--",  # em dash
    "\u2013": "-",  # en dash
    "\u2026": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace Unicode punctuation that breaks legacy console encodings.

    Args:
        text: The original text.

    Returns:
        The text with known problematic characters replaced. Anything else
        that still cannot be encoded as ASCII is backslash-escaped.
    """
    replaced = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return replaced.encode("ascii", "backslashreplace").decode("ascii")


def safe_log(logger_func, message, *args, **kwargs):
    """Call `logger_func`, falling back to ASCII-safe text on encode errors.

    Args:
        logger_func (Callable): A bound logger method such as logger.info.
        message: The message or format string.
    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        safe_args = tuple(safe_text(str(arg)) for arg in args)
        logger_func(safe_text(message), *safe_args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Wrap the standard level methods of `logger` with safe_log."""
    for method_name in ("debug", "info", "warning", "error", "critical"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str = None) -> logging.Logger:
    """Return a named logger that delegates output to the root logger.

    The logger keeps no handlers of its own; ConfigureLogger attaches the
    console and file handlers to the root logger once.

    Args:
        name: Logger name, usually the caller's __name__.

    Returns:
        logging.Logger: The patched logger.
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    if logger.handlers:
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Hide dev-only records from the console unless configured otherwise."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
