SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = ""

LATE_THRESHOLD_HOUR = 9
LATE_THRESHOLD_MINUTE = 15

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
