"""Impact journal domain service."""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from uuid import uuid4

import logfire

from eco.domain.model import ActionRecord
from eco.domain.repository import ActionRepository
from eco.domain.value import ActionId, ActionType, UserId
from eco.util.clock import Clock

from .base import Service

# Reflections created for a past day are stamped at local noon of that day
REFLECTION_TIME = time(12, 0)


@dataclass
class JournalDay:
    """A user's records for one calendar day."""

    day: date
    actions: list[ActionRecord]
    total_points: Decimal
    total_carbon_saved: Decimal

    @property
    def action_count(self) -> int:
        return len(self.actions)


@dataclass
class JournalOverview:
    """One page of journal days plus the user's lifetime totals."""

    days: list[JournalDay]
    total_days: int
    total_actions: int
    total_points: Decimal
    total_carbon_saved: Decimal


class JournalService(Service):
    """Per-day view of a user's records and free-text reflections.

    A reflection is stored as a REFLECTION action record worth nothing. It
    never goes through the logging transaction, so it does not touch points,
    streaks or badges.
    """

    def __init__(self, action_repository: ActionRepository, clock: Clock) -> None:
        self.action_repository = action_repository
        self.clock = clock

    async def get_day(self, user_id: UserId, day: date) -> JournalDay:
        """Get the user's records for a calendar day, oldest first.

        Args:
            user_id: User ID
            day: Calendar day in the configured time zone

        Returns:
            Records with day totals
        """
        with logfire.span("journal_service.get_day", user_id=str(user_id), day=str(day)):
            actions = await self.action_repository.find_by_user_in_range(
                user_id, self.clock.start_of_day(day), self.clock.end_of_day(day)
            )
            return _summarize(day, actions)

    async def get_overview(
        self, user_id: UserId, limit: int, offset: int = 0
    ) -> JournalOverview:
        """Get a page of the user's active days, newest day first.

        Pagination counts days, not records. Records inside a day are newest
        first. The totals cover every record the user has.

        Args:
            user_id: User ID
            limit: Maximum days in the page
            offset: Days to skip

        Returns:
            Page of days with lifetime totals
        """
        with logfire.span(
            "journal_service.get_overview", user_id=str(user_id), offset=offset
        ):
            actions = await self.action_repository.find_all_by_user(user_id)

            by_day: dict[date, list[ActionRecord]] = {}
            for action in actions:
                by_day.setdefault(self.clock.day_of(action.date), []).append(action)

            days = list(by_day.items())[offset : offset + limit]
            return JournalOverview(
                days=[_summarize(day, day_actions) for day, day_actions in days],
                total_days=len(by_day),
                total_actions=len(actions),
                total_points=sum((a.points for a in actions), Decimal("0")),
                total_carbon_saved=sum((a.carbon_saved for a in actions), Decimal("0")),
            )

    async def save_reflection(
        self, user_id: UserId, day: date, reflection: str
    ) -> ActionRecord:
        """Create or replace the user's reflection for a calendar day.

        Args:
            user_id: User ID
            day: Calendar day the reflection is about
            reflection: Reflection text

        Returns:
            Saved reflection record
        """
        with logfire.span(
            "journal_service.save_reflection", user_id=str(user_id), day=str(day)
        ):
            actions = await self.action_repository.find_by_user_in_range(
                user_id, self.clock.start_of_day(day), self.clock.end_of_day(day)
            )
            existing = next(
                (a for a in actions if a.type == ActionType.REFLECTION), None
            )

            if existing:
                saved = await self.action_repository.save(
                    existing.model_copy(update={"notes": reflection})
                )
                logfire.info("Reflection updated", user_id=str(user_id), day=str(day))
                return saved

            record = ActionRecord(
                id=ActionId(uuid4()),
                user_id=user_id,
                type=ActionType.REFLECTION,
                points=Decimal("0"),
                carbon_saved=Decimal("0"),
                notes=reflection,
                date=datetime.combine(day, REFLECTION_TIME, tzinfo=self.clock.tz),
            )
            saved = await self.action_repository.save(record)
            logfire.info("Reflection created", user_id=str(user_id), day=str(day))
            return saved


def _summarize(day: date, actions: list[ActionRecord]) -> JournalDay:
    return JournalDay(
        day=day,
        actions=actions,
        total_points=sum((a.points for a in actions), Decimal("0")),
        total_carbon_saved=sum((a.carbon_saved for a in actions), Decimal("0")),
    )
