"""Module: dateprefix.config

Date: 2026-10-18

Configuration package for dateprefix.

Settings are grouped by concern:
- app: application info and logging settings
- metadata: extended attribute names, epoch offset, date prefix format

Everything is re-exported here so callers can write:
    from dateprefix.config import PLIST_EPOCH_OFFSET
"""

from dateprefix.config.app import *  # noqa: F401, F403
from dateprefix.config.metadata import *  # noqa: F401, F403
