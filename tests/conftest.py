from __future__ import annotations

from datetime import datetime

import pytest

from checkin_tracker.container import build_container
from checkin_tracker.storage.memory_storage import InMemoryStorage


def local(*args) -> datetime:
    """Aware datetime for a local wall-clock time."""
    return datetime(*args).astimezone()


@pytest.fixture
def fixed_now() -> datetime:
    # Mid-July keeps the 30-day window clear of DST switches in either hemisphere.
    return local(2026, 7, 15, 12, 0, 0)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def container(storage):
    return build_container(storage=storage)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from checkin_tracker.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()
