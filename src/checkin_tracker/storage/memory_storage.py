from __future__ import annotations

from typing import Dict, Optional

from .base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Process-local storage; keeps the encoded JSON text like the file backend does."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        super().__init__()
        self._data: Dict[str, str] = dict(initial or {})

    def _read_raw(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def _write_raw(self, key: str, text: str) -> None:
        self._data[key] = text

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
