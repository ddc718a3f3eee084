from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import CorruptStorageError, StorageError
from .base import KeyValueStorage


class JsonFileStorage(KeyValueStorage):
    """One ``<key>.json`` file per key inside ``directory``.

    Writes go to a temp file in the same directory and are swapped in with
    ``os.replace`` so a crash never leaves a half-written collection.
    """

    def __init__(self, directory: str | Path):
        super().__init__()
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def _read_raw(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise CorruptStorageError(key, str(e)) from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def _write_raw(self, key: str, text: str) -> None:
        path = self._path(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
