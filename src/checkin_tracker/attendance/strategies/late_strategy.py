from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ..lateness import minutes_past_cutoff
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide(self, *, timestamp: datetime, cutoff_hour: int, cutoff_minute: int) -> StatusDecision:
        minutes = minutes_past_cutoff(timestamp, cutoff_hour=cutoff_hour, cutoff_minute=cutoff_minute)
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"{minutes} min after {cutoff_hour:02d}:{cutoff_minute:02d}",
        )
