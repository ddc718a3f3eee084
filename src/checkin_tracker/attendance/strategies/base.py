from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None

    @property
    def is_late(self) -> bool:
        return self.status is AttendanceStatus.LATE


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a check-in status."""

    @abstractmethod
    def decide(self, *, timestamp: datetime, cutoff_hour: int, cutoff_minute: int) -> StatusDecision:
        raise NotImplementedError
