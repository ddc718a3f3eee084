from __future__ import annotations

import logging

from ..core.constants import STORAGE_KEY_EMPLOYEES, STORAGE_KEY_RECORDS
from ..employees.model import DEFAULT_EMPLOYEES
from ..employees.storage_employee_repository import StorageEmployeeRepository
from .base import KeyValueStorage

logger = logging.getLogger(__name__)


def reset(storage: KeyValueStorage) -> None:
    """Drop both collections; the roster reseeds on next access."""
    with storage.locked():
        storage.delete(STORAGE_KEY_EMPLOYEES)
        storage.delete(STORAGE_KEY_RECORDS)
    logger.warning("Storage reset: roster and record log removed")


def seed_defaults(storage: KeyValueStorage) -> bool:
    """Write the default roster if none is stored. Returns True when seeding happened."""
    with storage.locked():
        if storage.read(STORAGE_KEY_EMPLOYEES) is not None:
            return False
        StorageEmployeeRepository(storage).save_employees(DEFAULT_EMPLOYEES)
    logger.info("Seeded %d default employees", len(DEFAULT_EMPLOYEES))
    return True
