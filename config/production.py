import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_OCCURRENCES = int(os.getenv("MAX_OCCURRENCES", "365"))
LEADERBOARD_LIMIT = int(os.getenv("LEADERBOARD_LIMIT", "10"))
UPCOMING_EVENT_DAYS = int(os.getenv("UPCOMING_EVENT_DAYS", "7"))
UPCOMING_EVENT_LIMIT = int(os.getenv("UPCOMING_EVENT_LIMIT", "5"))
