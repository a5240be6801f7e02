"""Clock and calendar-day helpers.

All day-boundary decisions (streaks, duplicate filtering, journal days) go
through a Clock so that one configured time zone applies everywhere and tests
can pin "now".
"""

import os
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from eco.util.error import ConfigurationError

LOCALTIME = Path("/etc/localtime")


def local_timezone() -> tzinfo:
    """The server's local zone, with its daylight-saving rules.

    Follows ``TZ`` when it names an IANA zone, then ``/etc/localtime``,
    and falls back to UTC when neither is usable.
    """
    name = os.environ.get("TZ", "").lstrip(":")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            pass

    if not LOCALTIME.exists():
        return timezone.utc

    # /etc/localtime is usually a link into the zoneinfo tree
    parts = LOCALTIME.resolve().parts
    if "zoneinfo" in parts:
        key = "/".join(parts[parts.index("zoneinfo") + 1 :])
        try:
            return ZoneInfo(key)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            pass
    with LOCALTIME.open("rb") as f:
        return ZoneInfo.from_file(f, key="localtime")


def resolve_timezone(name: str | None) -> tzinfo:
    """Resolve a configured time zone name.

    Args:
        name: IANA time zone name, or None for the server's local zone

    Returns:
        tzinfo instance

    Raises:
        ConfigurationError: If the name is unknown
    """
    if name is None:
        return local_timezone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ConfigurationError(f"Unknown time zone: {name}") from e


class Clock:
    """Wall clock bound to a single calendar-day time zone."""

    def __init__(self, tz: tzinfo) -> None:
        self.tz = tz

    def now(self) -> datetime:
        """Current instant, aware, in the clock's time zone."""
        return datetime.now(self.tz)

    def localize(self, moment: datetime) -> datetime:
        """Express an instant in the clock's time zone.

        Naive datetimes are taken to already be in the clock's zone.
        """
        if moment.tzinfo is None:
            return moment.replace(tzinfo=self.tz)
        return moment.astimezone(self.tz)

    def day_of(self, moment: datetime) -> date:
        """Calendar day an instant falls on."""
        return self.localize(moment).date()

    def start_of_day(self, day: date) -> datetime:
        """Midnight at the start of a calendar day."""
        return datetime.combine(day, time.min, tzinfo=self.tz)

    def end_of_day(self, day: date) -> datetime:
        """Midnight at the start of the following calendar day (exclusive bound)."""
        return self.start_of_day(day + timedelta(days=1))

    def today_start(self) -> datetime:
        """Local midnight of the current day."""
        return self.start_of_day(self.day_of(self.now()))


class FrozenClock(Clock):
    """Clock pinned to a settable instant."""

    def __init__(self, tz: tzinfo, now: datetime) -> None:
        super().__init__(tz)
        self._now = self.localize(now)

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        """Move the clock to a new instant."""
        self._now = self.localize(now)

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward."""
        self._now = self._now + delta
