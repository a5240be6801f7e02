"""Personal progress views: totals, daily and monthly activity, impact areas."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

import logfire

from eco.domain.catalog import ActionCatalog
from eco.domain.model import ActionRecord, TypeTotals
from eco.domain.repository import ActionRepository
from eco.domain.value import UserId
from eco.util.clock import Clock

from .base import Service

MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass
class ImpactTotals:
    """Records summed under one label (a day, a month or an impact area)."""

    label: str
    count: int = 0
    points: Decimal = field(default_factory=lambda: Decimal("0"))
    carbon_saved: Decimal = field(default_factory=lambda: Decimal("0"))

    def add(self, count: int, points: Decimal, carbon_saved: Decimal) -> None:
        self.count += count
        self.points += points
        self.carbon_saved += carbon_saved


@dataclass
class ActionStats:
    """A user's lifetime totals and recent daily activity."""

    total_actions: int
    total_points: Decimal
    total_carbon_saved: Decimal
    by_type: list[TypeTotals]
    daily: list[ImpactTotals]


class ProgressService(Service):
    """Read-only summaries of one user's records.

    Day and month boundaries follow the clock's time zone.
    """

    def __init__(
        self,
        action_repository: ActionRepository,
        action_catalog: ActionCatalog,
        clock: Clock,
        daily_window_days: int = 7,
    ) -> None:
        """Initialize progress service.

        Args:
            action_repository: Action repository
            action_catalog: Maps action types to impact areas
            clock: Clock and calendar-day boundary
            daily_window_days: Days before today covered by the daily breakdown
        """
        self.action_repository = action_repository
        self.action_catalog = action_catalog
        self.clock = clock
        self.daily_window_days = daily_window_days

    def today(self) -> date:
        return self.clock.day_of(self.clock.now())

    async def get_action_stats(self, user_id: UserId) -> ActionStats:
        """Lifetime totals, per-type totals and recent days with activity.

        The daily breakdown starts at local midnight ``daily_window_days``
        before today and lists only days with records, oldest first.
        """
        with logfire.span("progress_service.get_action_stats", user_id=str(user_id)):
            by_type = await self.action_repository.totals_by_type_for_user(user_id)

            today = self.today()
            recent = await self.action_repository.find_by_user_in_range(
                user_id,
                self.clock.start_of_day(today - timedelta(days=self.daily_window_days)),
                self.clock.end_of_day(today),
            )
            daily = self._bucket(
                recent, lambda r: self.clock.day_of(r.date).isoformat()
            )

            return ActionStats(
                total_actions=sum(t.count for t in by_type),
                total_points=sum((t.points for t in by_type), Decimal("0")),
                total_carbon_saved=sum((t.carbon_saved for t in by_type), Decimal("0")),
                by_type=by_type,
                daily=daily,
            )

    async def get_monthly(self, user_id: UserId, year: int) -> list[ImpactTotals]:
        """Months of ``year`` with activity, in calendar order."""
        with logfire.span(
            "progress_service.get_monthly", user_id=str(user_id), year=year
        ):
            records = await self.action_repository.find_by_user_in_range(
                user_id,
                self.clock.start_of_day(date(year, 1, 1)),
                self.clock.start_of_day(date(year + 1, 1, 1)),
            )
            return self._bucket(
                records, lambda r: MONTH_NAMES[self.clock.localize(r.date).month - 1]
            )

    def impact_by_category(self, by_type: list[TypeTotals]) -> list[ImpactTotals]:
        """Fold per-type totals into impact areas, busiest type's area first."""
        areas: dict[str, ImpactTotals] = {}
        for totals in by_type:
            label = self.action_catalog.category_of(totals.type).value
            area = areas.setdefault(label, ImpactTotals(label=label))
            area.add(totals.count, totals.points, totals.carbon_saved)
        return list(areas.values())

    @staticmethod
    def _bucket(records: list[ActionRecord], label_of) -> list[ImpactTotals]:
        # Records arrive oldest first, so buckets come out in time order
        buckets: dict[str, ImpactTotals] = {}
        for record in records:
            label = label_of(record)
            bucket = buckets.setdefault(label, ImpactTotals(label=label))
            bucket.add(1, record.points, record.carbon_saved)
        return list(buckets.values())
