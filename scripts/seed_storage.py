from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import get_settings_module

from checkin_tracker.storage.bootstrap import reset, seed_defaults
from checkin_tracker.storage.connection import StorageConfig, open_storage


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the default employee roster.")
    parser.add_argument("--reset", action="store_true", help="delete roster and record log first")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = StorageConfig(backend=settings.STORAGE_BACKEND, path=settings.STORAGE_PATH)
    storage = open_storage(config)

    if args.reset:
        reset(storage)
    seeded = seed_defaults(storage)

    state = "seeded" if seeded else "already present"
    print(f"OK: roster {state} -> {config.backend}:{config.path}")


if __name__ == "__main__":
    main()
