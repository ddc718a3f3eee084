from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .core.constants import LATE_THRESHOLD_HOUR, LATE_THRESHOLD_MINUTE
from .storage.connection import StorageConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in dir(settings):
        if name.isupper():
            app.config[name] = getattr(settings, name)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    storage_config = StorageConfig(
        backend=str(app.config.get("STORAGE_BACKEND", "json")),
        path=str(app.config.get("STORAGE_PATH", "instance/data")),
    )
    logger.info("Settings=%s storage=%s:%s", settings_module, storage_config.backend, storage_config.path)

    container = build_container(
        storage_config=storage_config,
        late_threshold_hour=int(app.config.get("LATE_THRESHOLD_HOUR", LATE_THRESHOLD_HOUR)),
        late_threshold_minute=int(app.config.get("LATE_THRESHOLD_MINUTE", LATE_THRESHOLD_MINUTE)),
    )
    app.extensions["checkin_container"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
