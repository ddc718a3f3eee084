from __future__ import annotations

from typing import ContextManager, Sequence

from ..core.constants import STORAGE_KEY_RECORDS
from ..core.exceptions import CorruptStorageError
from ..storage.base import KeyValueStorage
from .model import AttendanceRecord
from .repository import AttendanceRepository


class StorageAttendanceRepository(AttendanceRepository):
    def __init__(self, storage: KeyValueStorage, *, key: str = STORAGE_KEY_RECORDS):
        self._storage = storage
        self._key = key

    def load_records(self) -> Sequence[AttendanceRecord]:
        data = self._storage.read(self._key)
        if data is None:
            return []
        if not isinstance(data, list):
            raise CorruptStorageError(self._key, "expected a list")
        try:
            return [AttendanceRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptStorageError(self._key, str(e)) from e

    def save_records(self, records: Sequence[AttendanceRecord]) -> None:
        self._storage.write(self._key, [r.to_dict() for r in records])

    def locked(self) -> ContextManager[None]:
        return self._storage.locked()
