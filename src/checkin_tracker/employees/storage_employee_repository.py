from __future__ import annotations

import logging
from typing import ContextManager, Sequence

from ..core.constants import STORAGE_KEY_EMPLOYEES
from ..core.exceptions import CorruptStorageError
from ..storage.base import KeyValueStorage
from .model import DEFAULT_EMPLOYEES, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class StorageEmployeeRepository(EmployeeRepository):
    def __init__(self, storage: KeyValueStorage, *, key: str = STORAGE_KEY_EMPLOYEES):
        self._storage = storage
        self._key = key

    def load_employees(self) -> Sequence[Employee]:
        with self._storage.locked():
            data = self._storage.read(self._key)
            if data is None:
                # First access: persist the default roster so later writes extend it.
                logger.info("Seeding default roster (%d employees)", len(DEFAULT_EMPLOYEES))
                self.save_employees(DEFAULT_EMPLOYEES)
                return list(DEFAULT_EMPLOYEES)

        if not isinstance(data, list):
            raise CorruptStorageError(self._key, "expected a list")
        try:
            return [Employee.from_dict(item) for item in data]
        except (KeyError, TypeError) as e:
            raise CorruptStorageError(self._key, str(e)) from e

    def save_employees(self, employees: Sequence[Employee]) -> None:
        self._storage.write(self._key, [e.to_dict() for e in employees])

    def locked(self) -> ContextManager[None]:
        return self._storage.locked()
