from __future__ import annotations

import uuid


def new_id() -> str:
    """Random identifier, unique regardless of how close together calls are."""
    return uuid.uuid4().hex
