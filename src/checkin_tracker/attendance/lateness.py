from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import to_local
from ..core.constants import LATE_THRESHOLD_HOUR, LATE_THRESHOLD_MINUTE


def is_late(
    timestamp: datetime,
    *,
    cutoff_hour: int = LATE_THRESHOLD_HOUR,
    cutoff_minute: int = LATE_THRESHOLD_MINUTE,
) -> bool:
    """True when the local wall-clock time is past ``cutoff_hour:cutoff_minute``.

    Only hour and minute are compared, so 09:15:59 is still on time with the
    default cutoff and 09:16 is late.
    """
    local = to_local(timestamp)
    if local.hour > cutoff_hour:
        return True
    return local.hour == cutoff_hour and local.minute > cutoff_minute


def minutes_past_cutoff(
    timestamp: datetime,
    *,
    cutoff_hour: int = LATE_THRESHOLD_HOUR,
    cutoff_minute: int = LATE_THRESHOLD_MINUTE,
) -> int:
    local = to_local(timestamp)
    return (local.hour * 60 + local.minute) - (cutoff_hour * 60 + cutoff_minute)
