"""Backup the JSON storage directory.

Note: Only the ``json`` backend has anything on disk to back up.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if settings.STORAGE_BACKEND != "json":
        raise SystemExit(f"Nothing to back up for storage backend {settings.STORAGE_BACKEND!r}")

    source = Path(settings.STORAGE_PATH)
    if not source.is_dir():
        raise SystemExit(f"Storage directory not found: {source}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    target = out_dir / f"checkin_data_{ts}"
    shutil.copytree(source, target, ignore=shutil.ignore_patterns("*.tmp"))
    print(f"OK: Backup created: {target}")


if __name__ == "__main__":
    main()
