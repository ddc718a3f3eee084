from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.fault_service import FaultService
from .attendance.service import AttendanceService
from .attendance.storage_attendance_repository import StorageAttendanceRepository
from .core.constants import FAULT_WINDOW_DAYS, LATE_THRESHOLD_HOUR, LATE_THRESHOLD_MINUTE
from .employees.service import RosterService
from .employees.storage_employee_repository import StorageEmployeeRepository
from .reports.service import ReportService
from .storage.base import KeyValueStorage
from .storage.connection import StorageConfig, open_storage


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage

    employees_repo: StorageEmployeeRepository
    attendance_repo: StorageAttendanceRepository

    roster_service: RosterService
    attendance_service: AttendanceService
    fault_service: FaultService
    report_service: ReportService


def build_container(
    *,
    storage_config: StorageConfig | None = None,
    storage: KeyValueStorage | None = None,
    late_threshold_hour: int = LATE_THRESHOLD_HOUR,
    late_threshold_minute: int = LATE_THRESHOLD_MINUTE,
    fault_window_days: int = FAULT_WINDOW_DAYS,
) -> Container:
    if storage is None:
        storage = open_storage(storage_config or StorageConfig())

    employees_repo = StorageEmployeeRepository(storage)
    attendance_repo = StorageAttendanceRepository(storage)

    roster_service = RosterService(employees_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        strategy_factory=AttendanceStrategyFactory(
            cutoff_hour=int(late_threshold_hour),
            cutoff_minute=int(late_threshold_minute),
        ),
    )
    fault_service = FaultService(attendance_service, window_days=fault_window_days)
    report_service = ReportService(roster_service, attendance_service)

    return Container(
        storage=storage,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        roster_service=roster_service,
        attendance_service=attendance_service,
        fault_service=fault_service,
        report_service=report_service,
    )
