from __future__ import annotations

import json
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from ..core.exceptions import CorruptStorageError


class KeyValueStorage(ABC):
    """Durable key -> JSON document store.

    Collections are read and written whole; callers that read-modify-write
    hold ``locked()`` for the duration so a process has a single writer.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @abstractmethod
    def _read_raw(self, key: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def _write_raw(self, key: str, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError

    def read(self, key: str) -> Optional[Any]:
        text = self._read_raw(key)
        if text is None:
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            raise CorruptStorageError(key, str(e)) from e

    def write(self, key: str, value: Any) -> None:
        self._write_raw(key, json.dumps(value, ensure_ascii=False, indent=2))

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield
