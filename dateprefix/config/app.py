"""Module: dateprefix.config.app

Date: 2026-10-18

Application-level configuration: app info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "dateprefix"
APP_VERSION = "1.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging (errors only by default)
LOG_TO_FILE = True
LOG_FILE_LEVEL = "ERROR"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 5_000_000  # 5MB per debug file
LOG_DEBUG_FILE_BACKUP_COUNT = 2

# Records logged with extra={"dev_only": True} stay out of the console
SHOW_DEV_ONLY_IN_CONSOLE = False
