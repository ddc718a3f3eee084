from __future__ import annotations

from typing import ContextManager, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def load_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def save_records(self, records: Sequence[AttendanceRecord]) -> None:
        """Replace the whole record log."""

        raise NotImplementedError

    def locked(self) -> ContextManager[None]:
        raise NotImplementedError
