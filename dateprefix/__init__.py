"""dateprefix: prefix filenames with their original creation date.

Resolves a creation date per file (Photos extended attributes first, then the
filesystem creation time), plans `YYYYMMDD-<name>` renames and applies them.
"""

from dateprefix.config import APP_VERSION

__version__ = APP_VERSION
