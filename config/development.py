import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

STORAGE_BACKEND = Config.STORAGE_BACKEND
STORAGE_PATH = Config.STORAGE_PATH

LATE_THRESHOLD_HOUR = Config.LATE_THRESHOLD_HOUR
LATE_THRESHOLD_MINUTE = Config.LATE_THRESHOLD_MINUTE

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
