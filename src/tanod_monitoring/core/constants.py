"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
UNNAMED_LABEL = "No name"
UNKNOWN_LOCATION = "Unknown location"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
