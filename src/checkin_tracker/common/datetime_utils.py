from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time, timezone-aware.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().astimezone()


def to_local(value: datetime) -> datetime:
    """Return the local wall-clock representation of ``value``.

    Naive datetimes are taken to already be local time.
    """
    return value.astimezone()


def format_timestamp(value: datetime) -> str:
    """Serialize an instant as ISO-8601 with its UTC offset."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; values without offset are read as local time."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed
