from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in."""

    def decide(self, *, timestamp: datetime, cutoff_hour: int, cutoff_minute: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)
