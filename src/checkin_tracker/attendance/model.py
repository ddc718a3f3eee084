from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Mapping

from ..common.datetime_utils import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in.

    ``id`` and ``employee_id`` are fixed at creation; only ``timestamp`` may be amended.
    """

    id: str
    employee_id: str
    timestamp: datetime

    def with_timestamp(self, timestamp: datetime) -> "AttendanceRecord":
        return replace(self, timestamp=timestamp)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            timestamp=parse_timestamp(str(data["timestamp"])),
        )
