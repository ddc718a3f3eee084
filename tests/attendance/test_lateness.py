from datetime import datetime, timezone

import pytest

from checkin_tracker.attendance.lateness import is_late, minutes_past_cutoff


@pytest.mark.parametrize(
    "hour, minute, second, expected",
    [
        (0, 0, 0, False),
        (8, 59, 59, False),
        (9, 0, 0, False),
        (9, 15, 0, False),
        (9, 15, 59, False),
        (9, 16, 0, True),
        (10, 0, 0, True),
        (23, 59, 0, True),
    ],
)
def test_is_late_cutoff_at_nine_fifteen(hour, minute, second, expected):
    """Seconds are ignored: the first late minute is 09:16."""
    assert is_late(datetime(2026, 1, 5, hour, minute, second)) is expected


def test_is_late_reads_local_wall_clock_not_utc():
    on_time_local = datetime(2026, 1, 5, 9, 0).astimezone()
    late_local = datetime(2026, 1, 5, 11, 0).astimezone()

    assert is_late(on_time_local.astimezone(timezone.utc)) is False
    assert is_late(late_local.astimezone(timezone.utc)) is True


def test_cutoff_hour_and_minute_are_independent():
    ts = datetime(2026, 1, 5, 8, 40)

    assert is_late(ts, cutoff_hour=8, cutoff_minute=30) is True
    assert is_late(ts, cutoff_hour=8, cutoff_minute=45) is False
    assert is_late(ts, cutoff_hour=9, cutoff_minute=0) is False


def test_minutes_past_cutoff():
    assert minutes_past_cutoff(datetime(2026, 1, 5, 9, 45)) == 30
    assert minutes_past_cutoff(datetime(2026, 1, 5, 9, 0)) == -15
