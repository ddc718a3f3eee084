from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence, Union

from ..common.datetime_utils import now_local, parse_timestamp, to_local
from ..common.ids import new_id
from ..core.exceptions import ValidationError
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .strategies.base import StatusDecision

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases over the record log: check in, history, amend."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or AttendanceStrategyFactory()

    @property
    def strategy_factory(self) -> AttendanceStrategyFactory:
        return self._factory

    def add_record(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        now = to_local(now) if now else now_local()
        record = AttendanceRecord(id=new_id(), employee_id=employee_id, timestamp=now)

        with self._attendance.locked():
            records = list(self._attendance.load_records())
            self._attendance.save_records([*records, record])

        logger.info("Check-in %s for employee %s at %s", record.id, employee_id, now.isoformat())
        return record

    def get_records(self) -> Sequence[AttendanceRecord]:
        return self._attendance.load_records()

    def get_employee_records(self, employee_id: str) -> list[AttendanceRecord]:
        """Records for one employee, newest first.

        Equal timestamps keep their log order (``sorted`` is stable).
        """
        records = [r for r in self._attendance.load_records() if r.employee_id == employee_id]
        return sorted(records, key=lambda r: r.timestamp, reverse=True)

    def get_record(self, record_id: str) -> Optional[AttendanceRecord]:
        for record in self._attendance.load_records():
            if record.id == record_id:
                return record
        return None

    def update_record(self, record_id: str, new_timestamp: Union[datetime, str]) -> bool:
        """Replace the timestamp of one record.

        Returns False and leaves the log untouched when ``record_id`` is unknown.
        """
        timestamp = self._coerce_timestamp(new_timestamp)

        with self._attendance.locked():
            records = list(self._attendance.load_records())
            found = False
            updated = []
            for r in records:
                if r.id == record_id:
                    updated.append(r.with_timestamp(timestamp))
                    found = True
                else:
                    updated.append(r)

            if not found:
                logger.debug("Amend skipped: record %s not found", record_id)
                return False
            self._attendance.save_records(updated)

        logger.info("Record %s amended to %s", record_id, timestamp.isoformat())
        return True

    def is_late(self, record: AttendanceRecord) -> bool:
        return self._factory.is_late(record.timestamp)

    def classify(self, record: AttendanceRecord) -> StatusDecision:
        return self._factory.decide(record.timestamp)

    def get_history_ui(self, employee_id: str, *, limit: int | None = None) -> list[dict]:
        rows = self.get_employee_records(employee_id)
        if limit is not None:
            rows = rows[:limit]
        return [self._to_ui(r) for r in rows]

    def _to_ui(self, r: AttendanceRecord) -> dict:
        decision = self.classify(r)
        local = to_local(r.timestamp)
        return {
            "id": r.id,
            "employee_id": r.employee_id,
            "timestamp": local.isoformat(),
            "date": local.strftime("%Y-%m-%d"),
            "time": local.strftime("%H:%M"),
            "status": decision.status.label,
            "is_late": decision.is_late,
            "css_class": "late" if decision.is_late else "on-time",
            "note": decision.note or "",
        }

    @staticmethod
    def _coerce_timestamp(value: Union[datetime, str]) -> datetime:
        if isinstance(value, datetime):
            return to_local(value) if value.tzinfo is None else value
        try:
            return parse_timestamp(value)
        except (TypeError, ValueError, AttributeError) as e:
            raise ValidationError(f"Invalid timestamp: {value!r}") from e
