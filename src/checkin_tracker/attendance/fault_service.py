from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import now_local, to_local
from ..core.constants import FAULT_WINDOW_DAYS
from ..core.enums import FaultTier
from ..employees.model import Employee
from .model import AttendanceRecord
from .service import AttendanceService


@dataclass(frozen=True)
class EmployeeFaultSummary:
    employee: Employee
    fault_count: int
    tier: FaultTier
    late_total: int


class FaultService:
    """Rolling fault (lateness) counts per employee.

    A fault is a late record with ``now - window_days <= timestamp``. Every call
    recomputes ``now``; nothing is cached. Tier thresholds are 0 / 1 / 2 / >=3,
    see ``FaultTier.for_count``.
    """

    def __init__(self, attendance: AttendanceService, *, window_days: int = FAULT_WINDOW_DAYS):
        self._attendance = attendance
        self._window = timedelta(days=int(window_days))

    def get_fault_count(self, employee_id: str, *, now: datetime | None = None) -> int:
        now = to_local(now) if now else now_local()
        return self._count_faults(self._attendance.get_employee_records(employee_id), now)

    def get_fault_tier(self, employee_id: str, *, now: datetime | None = None) -> FaultTier:
        return FaultTier.for_count(self.get_fault_count(employee_id, now=now))

    def rank_employees(self, employees: Sequence[Employee], *, now: datetime | None = None) -> list[EmployeeFaultSummary]:
        """Summaries ordered by fault count, highest first; ties keep roster order."""
        now = to_local(now) if now else now_local()
        by_employee: dict[str, list[AttendanceRecord]] = {}
        for r in self._attendance.get_records():
            by_employee.setdefault(r.employee_id, []).append(r)

        summaries = []
        for employee in employees:
            records = by_employee.get(employee.id, [])
            count = self._count_faults(records, now)
            summaries.append(
                EmployeeFaultSummary(
                    employee=employee,
                    fault_count=count,
                    tier=FaultTier.for_count(count),
                    late_total=sum(1 for r in records if self._attendance.is_late(r)),
                )
            )
        summaries.sort(key=lambda s: s.fault_count, reverse=True)
        return summaries

    def _count_faults(self, records: Iterable[AttendanceRecord], now: datetime) -> int:
        window_start = now - self._window
        return sum(1 for r in records if r.timestamp >= window_start and self._attendance.is_late(r))
