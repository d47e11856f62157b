"""Module: dateprefix.config.metadata

Date: 2026-10-18

Creation date sources and date prefix settings.
"""

# =====================================
# EXTENDED ATTRIBUTES
# =====================================

# Written by the Photos asset subsystem on macOS; both hold a binary plist
# whose root object is a real or a date.
CUSTOM_CREATION_DATE_ATTR = "com.apple.assetsd.customCreationDate"
ADDED_DATE_ATTR = "com.apple.assetsd.addedDate"

# Tried in this order before falling back to the filesystem creation time
DATE_ATTRIBUTE_ORDER = (
    ("custom_creation_date", CUSTOM_CREATION_DATE_ATTR),
    ("added_date", ADDED_DATE_ATTR),
)

# =====================================
# BINARY PLIST
# =====================================

# Seconds between 1970-01-01T00:00:00Z and 2001-01-01T00:00:00Z
PLIST_EPOCH_OFFSET = 978307200

# =====================================
# DATE PREFIX
# =====================================

DATE_PREFIX_FORMAT = "%Y%m%d"
DATE_PREFIX_SEPARATOR = "-"

# Directory listing used by the command-line shell
SKIP_HIDDEN_FILES = True
