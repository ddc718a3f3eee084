import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = Config.STORAGE_BACKEND
STORAGE_PATH = os.getenv("STORAGE_PATH", "/var/lib/checkin-tracker")

LATE_THRESHOLD_HOUR = Config.LATE_THRESHOLD_HOUR
LATE_THRESHOLD_MINUTE = Config.LATE_THRESHOLD_MINUTE

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
