"""Unit tests for Clock."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from eco.util import clock as clock_module
from eco.util.clock import Clock, FrozenClock, local_timezone, resolve_timezone
from eco.util.error import ConfigurationError

DUBLIN = ZoneInfo("Europe/Dublin")


class TestClock:
    """Tests for calendar-day helpers."""

    def test_day_of_uses_clock_zone(self):
        """An instant late in UTC can already be tomorrow locally."""
        clock = Clock(ZoneInfo("Asia/Tokyo"))

        assert clock.day_of(datetime(2025, 6, 15, 20, 0, tzinfo=timezone.utc)) == date(
            2025, 6, 16
        )

    def test_naive_datetimes_are_local(self):
        """Naive values are read as wall time in the clock's zone."""
        clock = Clock(DUBLIN)

        assert clock.day_of(datetime(2025, 6, 15, 23, 30)) == date(2025, 6, 15)

    def test_day_bounds(self):
        """A day runs from local midnight to the next local midnight."""
        clock = Clock(DUBLIN)

        start = clock.start_of_day(date(2025, 6, 15))
        end = clock.end_of_day(date(2025, 6, 15))

        assert start == datetime(2025, 6, 15, tzinfo=DUBLIN)
        assert end == datetime(2025, 6, 16, tzinfo=DUBLIN)
        assert start.utcoffset() == timedelta(hours=1)

    def test_now_is_aware(self):
        """now() carries the clock's zone."""
        assert Clock(timezone.utc).now().tzinfo is timezone.utc


class TestFrozenClock:
    """Tests for the settable test clock."""

    def test_set_and_advance(self):
        """The frozen instant only moves when told to."""
        clock = FrozenClock(timezone.utc, datetime(2025, 6, 15, 12, tzinfo=timezone.utc))

        clock.advance(timedelta(hours=13))
        assert clock.now() == datetime(2025, 6, 16, 1, tzinfo=timezone.utc)
        assert clock.today_start() == datetime(2025, 6, 16, tzinfo=timezone.utc)

        clock.set(datetime(2025, 1, 1, tzinfo=timezone.utc))
        assert clock.now() == datetime(2025, 1, 1, tzinfo=timezone.utc)


class TestResolveTimezone:
    """Tests for time zone configuration."""

    def test_named_zone(self):
        assert resolve_timezone("Europe/Dublin") == DUBLIN

    def test_local_zone_when_unset(self):
        assert resolve_timezone(None) is not None

    def test_local_zone_follows_daylight_saving(self, monkeypatch):
        """The local zone keeps its DST rules instead of freezing today's offset."""
        monkeypatch.setenv("TZ", "America/New_York")
        clock = Clock(resolve_timezone(None))

        # 23:30 local on both dates, one in EST and one in EDT
        assert clock.day_of(datetime(2025, 12, 2, 4, 30, tzinfo=timezone.utc)) == date(
            2025, 12, 1
        )
        assert clock.day_of(datetime(2025, 7, 2, 3, 30, tzinfo=timezone.utc)) == date(
            2025, 7, 1
        )
        assert clock.start_of_day(date(2025, 12, 1)).utcoffset() == timedelta(hours=-5)
        assert clock.start_of_day(date(2025, 7, 1)).utcoffset() == timedelta(hours=-4)

    def test_local_zone_accepts_colon_prefix(self, monkeypatch):
        monkeypatch.setenv("TZ", ":Europe/Dublin")

        assert local_timezone() == DUBLIN

    def test_local_zone_defaults_to_utc(self, monkeypatch, tmp_path):
        """Without TZ or /etc/localtime the day boundary is UTC midnight."""
        monkeypatch.delenv("TZ", raising=False)
        monkeypatch.setattr(clock_module, "LOCALTIME", tmp_path / "localtime")

        assert local_timezone() is timezone.utc

    def test_unknown_zone(self):
        with pytest.raises(ConfigurationError):
            resolve_timezone("Mars/Olympus_Mons")
