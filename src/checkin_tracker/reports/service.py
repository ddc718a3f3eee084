from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..attendance.service import AttendanceService
from ..common.datetime_utils import now_local, to_local
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.service import RosterService
from .acta import ActaDocument


@dataclass(frozen=True)
class ReportData:
    employee: Employee
    rows: list[dict]


class ReportService:
    """Read-only exports built from the roster, the record log and the lateness rule."""

    def __init__(self, roster: RosterService, attendance: AttendanceService):
        self._roster = roster
        self._attendance = attendance

    def build_employee_export(self, employee_id: str) -> ReportData:
        employee = self._roster.require_employee(employee_id)

        rows = []
        for r in self._attendance.get_employee_records(employee_id):
            local = to_local(r.timestamp)
            rows.append(
                {
                    "Name": employee.name,
                    "Date": local.strftime("%Y-%m-%d"),
                    "Time": local.strftime("%H:%M"),
                    "Status": self._attendance.classify(r).status.label,
                }
            )
        return ReportData(employee=employee, rows=rows)

    def build_acta(self, record_id: str, *, issued_at: datetime | None = None) -> ActaDocument:
        record = self._attendance.get_record(record_id)
        if not record:
            raise NotFoundError(f"Record {record_id} does not exist")
        employee = self._roster.require_employee(record.employee_id)

        return ActaDocument(
            employee_name=employee.name,
            employee_number=employee.employee_number,
            department=employee.department,
            record_id=record.id,
            record_time=record.timestamp,
            is_late=self._attendance.is_late(record),
            issued_at=issued_at or now_local(),
        )
