from __future__ import annotations

from dataclasses import dataclass

from .base import KeyValueStorage
from .json_file_storage import JsonFileStorage
from .memory_storage import InMemoryStorage


@dataclass(frozen=True)
class StorageConfig:
    backend: str = "json"
    path: str = "instance/data"


def open_storage(config: StorageConfig) -> KeyValueStorage:
    """Storage factory keyed by ``config.backend`` (``json`` or ``memory``)."""
    backend = config.backend.strip().lower()
    if backend == "json":
        return JsonFileStorage(config.path)
    if backend == "memory":
        return InMemoryStorage()
    raise ValueError(f"Unsupported storage backend: {config.backend!r}")
