from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import LATE_THRESHOLD_HOUR, LATE_THRESHOLD_MINUTE
from .lateness import is_late
from .strategies.base import AttendanceStrategy, StatusDecision
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the strategy for a check-in time."""

    cutoff_hour: int = LATE_THRESHOLD_HOUR
    cutoff_minute: int = LATE_THRESHOLD_MINUTE

    def is_late(self, timestamp: datetime) -> bool:
        return is_late(timestamp, cutoff_hour=self.cutoff_hour, cutoff_minute=self.cutoff_minute)

    def for_timestamp(self, timestamp: datetime) -> AttendanceStrategy:
        if self.is_late(timestamp):
            return LateStrategy()
        return NormalStrategy()

    def decide(self, timestamp: datetime) -> StatusDecision:
        strategy = self.for_timestamp(timestamp)
        return strategy.decide(timestamp=timestamp, cutoff_hour=self.cutoff_hour, cutoff_minute=self.cutoff_minute)
