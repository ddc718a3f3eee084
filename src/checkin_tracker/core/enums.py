from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Check-in verdict against the lateness cutoff."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"

    @property
    def label(self) -> str:
        return "Late" if self is AttendanceStatus.LATE else "On time"


class FaultTier(str, Enum):
    """Severity band for a rolling fault count.

    Thresholds are a contract for sorting and coloring:
    0 -> NEUTRAL, 1 -> WARNING, 2 -> SEVERE, 3 or more -> CRITICAL.
    """

    NEUTRAL = "NEUTRAL"
    WARNING = "WARNING"
    SEVERE = "SEVERE"
    CRITICAL = "CRITICAL"

    @classmethod
    def for_count(cls, count: int) -> "FaultTier":
        if count >= 3:
            return cls.CRITICAL
        if count == 2:
            return cls.SEVERE
        if count == 1:
            return cls.WARNING
        return cls.NEUTRAL
