from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime, timedelta

import pytest

from checkin_tracker.attendance.model import AttendanceRecord
from checkin_tracker.attendance.service import AttendanceService
from checkin_tracker.core.exceptions import ValidationError


class InMemoryAttendance:
    def __init__(self, records=None):
        self.records: list[AttendanceRecord] = list(records or [])
        self.saves = 0

    def load_records(self):
        return list(self.records)

    def save_records(self, records):
        self.saves += 1
        self.records = list(records)

    def locked(self):
        return nullcontext()


def _rec(record_id: str, employee_id: str, *args) -> AttendanceRecord:
    return AttendanceRecord(id=record_id, employee_id=employee_id, timestamp=datetime(*args).astimezone())


def test_add_record_then_history_contains_it():
    repo = InMemoryAttendance([_rec("a", "1", 2026, 7, 1, 8, 0)])
    svc = AttendanceService(repo)

    before = datetime.now().astimezone()
    record = svc.add_record("1")
    after = datetime.now().astimezone()

    history = svc.get_employee_records("1")
    assert [r.id for r in history].count(record.id) == 1
    assert len(history) == 2
    assert record.employee_id == "1"
    assert before - timedelta(seconds=1) <= record.timestamp <= after + timedelta(seconds=1)
    assert repo.saves == 1


def test_add_record_ids_unique_for_same_instant(fixed_now):
    svc = AttendanceService(InMemoryAttendance())

    ids = {svc.add_record("1", now=fixed_now).id for _ in range(50)}

    assert len(ids) == 50


def test_employee_records_newest_first_and_filtered():
    repo = InMemoryAttendance(
        [
            _rec("old", "1", 2026, 6, 1, 9, 0),
            _rec("other", "2", 2026, 7, 1, 9, 0),
            _rec("new", "1", 2026, 7, 2, 9, 0),
            _rec("mid", "1", 2026, 6, 15, 9, 0),
        ]
    )
    svc = AttendanceService(repo)

    records = svc.get_employee_records("1")

    assert [r.id for r in records] == ["new", "mid", "old"]
    assert all(a.timestamp >= b.timestamp for a, b in zip(records, records[1:]))


def test_employee_records_ties_keep_log_order():
    repo = InMemoryAttendance(
        [
            _rec("first", "1", 2026, 7, 1, 9, 0),
            _rec("second", "1", 2026, 7, 1, 9, 0),
            _rec("later", "1", 2026, 7, 2, 9, 0),
        ]
    )

    records = AttendanceService(repo).get_employee_records("1")

    assert [r.id for r in records] == ["later", "first", "second"]


def test_dangling_employee_reference_yields_no_rows():
    svc = AttendanceService(InMemoryAttendance([_rec("x", "ghost", 2026, 7, 1, 9, 0)]))

    assert svc.get_employee_records("1") == []


def test_update_record_changes_only_target():
    a = _rec("a", "1", 2026, 7, 1, 9, 30)
    b = _rec("b", "1", 2026, 7, 2, 8, 0)
    repo = InMemoryAttendance([a, b])
    svc = AttendanceService(repo)
    new_ts = datetime(2026, 7, 1, 9, 0).astimezone()

    assert svc.update_record("a", new_ts) is True

    assert repo.records[0] == AttendanceRecord(id="a", employee_id="1", timestamp=new_ts)
    assert repo.records[1] == b


def test_update_record_unknown_id_leaves_log_unchanged():
    original = [_rec("a", "1", 2026, 7, 1, 9, 30)]
    repo = InMemoryAttendance(original)
    svc = AttendanceService(repo)

    assert svc.update_record("missing", datetime(2026, 7, 1, 8, 0)) is False

    assert repo.records == original
    assert repo.saves == 0


def test_update_record_accepts_iso_string_and_naive_local():
    repo = InMemoryAttendance([_rec("a", "1", 2026, 7, 1, 9, 30)])
    svc = AttendanceService(repo)

    svc.update_record("a", "2026-07-01T08:45")
    assert repo.records[0].timestamp == datetime(2026, 7, 1, 8, 45).astimezone()

    svc.update_record("a", datetime(2026, 7, 1, 10, 5))
    assert repo.records[0].timestamp == datetime(2026, 7, 1, 10, 5).astimezone()
    assert svc.is_late(repo.records[0])


def test_update_record_rejects_garbage_timestamp():
    svc = AttendanceService(InMemoryAttendance([_rec("a", "1", 2026, 7, 1, 9, 30)]))

    with pytest.raises(ValidationError) as exc:
        svc.update_record("a", "not-a-date")
    assert isinstance(exc.value.__cause__, ValueError)


def test_history_ui_rows():
    repo = InMemoryAttendance([_rec("a", "1", 2026, 7, 1, 9, 45), _rec("b", "1", 2026, 7, 2, 9, 10)])
    rows = AttendanceService(repo).get_history_ui("1")

    assert [r["id"] for r in rows] == ["b", "a"]
    assert rows[0]["status"] == "On time"
    assert rows[1]["status"] == "Late"
    assert rows[1]["time"] == "09:45"
    assert rows[1]["date"] == "2026-07-01"
    assert rows[1]["note"] == "30 min after 09:15"
