"""Tests for timezone helpers."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from sportspage.utilities.tz import (
    DEFAULT_TIMEZONE,
    format_day_label,
    format_time,
    get_timezone,
    local_date,
    to_local,
)

EASTERN = ZoneInfo("America/New_York")


class TestTimezones:
    def test_unknown_timezone_falls_back(self):
        assert get_timezone("Mars/Olympus") == ZoneInfo(DEFAULT_TIMEZONE)
        assert get_timezone(None) == ZoneInfo(DEFAULT_TIMEZONE)

    def test_to_local_rejects_naive(self):
        with pytest.raises(ValueError):
            to_local(datetime(2025, 10, 19, 12, 0), EASTERN)

    def test_local_date_uses_reference_zone(self):
        late = datetime(2025, 10, 20, 3, 0, tzinfo=UTC)
        reference = datetime(2025, 10, 19, 12, 0, tzinfo=EASTERN)
        assert local_date(late, reference) == date(2025, 10, 19)


class TestFormatting:
    def test_day_label(self):
        assert format_day_label(date(2025, 10, 22)) == "WED, OCT 22"
        assert format_day_label(date(2025, 11, 3)) == "MON, NOV 3"

    def test_time(self):
        kickoff = datetime(2025, 10, 19, 23, 30, tzinfo=UTC)
        assert format_time(kickoff, EASTERN) == "7:30 PM"
        assert format_time(datetime(2025, 10, 19, 4, 5, tzinfo=UTC), EASTERN) == "12:05 AM"
