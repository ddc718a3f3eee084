import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Storage: "json" keeps one file per collection under STORAGE_PATH, "memory" is process-local.
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "json")
    STORAGE_PATH = os.environ.get("STORAGE_PATH", "instance/data")

    LATE_THRESHOLD_HOUR = int(os.environ.get("LATE_THRESHOLD_HOUR", "9"))
    LATE_THRESHOLD_MINUTE = int(os.environ.get("LATE_THRESHOLD_MINUTE", "15"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
