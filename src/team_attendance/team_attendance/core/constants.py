"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Safety bound on a single recurring series; overridable via settings.
MAX_OCCURRENCES = 365

ALL_DAY = "All Day"
FALLBACK_HOUR = 12
FALLBACK_MINUTE = 0

# Generated occurrences are stored at noon UTC so the calendar date survives
# any timezone shift.
OCCURRENCE_HOUR_UTC = 12

DEFAULT_LEADERBOARD_LIMIT = 10
DEFAULT_UPCOMING_EVENT_DAYS = 7
DEFAULT_UPCOMING_EVENT_LIMIT = 5
