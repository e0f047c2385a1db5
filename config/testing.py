SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_OCCURRENCES = 365
LEADERBOARD_LIMIT = 10
UPCOMING_EVENT_DAYS = 7
UPCOMING_EVENT_LIMIT = 5
