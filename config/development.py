import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Longest recurring series a single rule may expand to
MAX_OCCURRENCES = int(os.getenv("MAX_OCCURRENCES", "365"))

LEADERBOARD_LIMIT = int(os.getenv("LEADERBOARD_LIMIT", "10"))

# Guardian digests list the next few events
UPCOMING_EVENT_DAYS = int(os.getenv("UPCOMING_EVENT_DAYS", "7"))
UPCOMING_EVENT_LIMIT = int(os.getenv("UPCOMING_EVENT_LIMIT", "5"))
