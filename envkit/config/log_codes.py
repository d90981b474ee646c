"""
Log codes for configuration-related operations.
"""

CONFIG = "config"

SETTINGS = f"{CONFIG}.settings"
SETTINGS_RESOLVED = f"{SETTINGS}.resolved"
SETTINGS_FILE_MISSING = f"{SETTINGS}.file_missing"
SETTINGS_FILE_UNREADABLE = f"{SETTINGS}.file_unreadable"
