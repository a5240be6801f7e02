"""Action logging domain service.

Logging a batch of actions is the one place where points, streaks and badges
change. The whole transaction runs under a per-user lock so two requests from
the same user cannot interleave their read-modify-write of the counters.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

import logfire

from eco.domain.catalog import ActionCatalog
from eco.domain.error import NoNewActionsError, NotFoundError, ValidationError
from eco.domain.model import ActionRecord, Badge, User
from eco.domain.repository import (
    ActionRepository,
    TransactionManager,
    UserRepository,
)
from eco.domain.value import ActionId, ActionType, UserId
from eco.util.clock import Clock
from eco.util.locks import KeyedLock

from .badge_service import BadgeService
from .base import Service
from .streak_service import compute_streak

MAX_NOTES_LENGTH = 500


@dataclass(frozen=True)
class ActionSubmission:
    """One action as submitted by a client, before validation."""

    type: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class AcceptedAction:
    """A validated submission."""

    type: ActionType
    notes: str


@dataclass
class AccrualStats:
    """What one logging transaction did to the user's counters."""

    total_points: Decimal
    actions_added: int
    current_streak: int
    longest_streak: int
    points_earned: Decimal
    carbon_saved: Decimal


@dataclass
class LogActionsResult:
    """Outcome of a logging transaction."""

    saved_actions: list[ActionRecord]
    new_badges: list[Badge]
    stats: AccrualStats


class ActionService(Service):
    """Domain service for logging and reading action records."""

    def __init__(
        self,
        action_repository: ActionRepository,
        user_repository: UserRepository,
        badge_service: BadgeService,
        action_catalog: ActionCatalog,
        clock: Clock,
        user_locks: KeyedLock,
        transaction: TransactionManager,
    ) -> None:
        """Initialize action service.

        Args:
            action_repository: Action repository
            user_repository: User repository
            badge_service: Badge domain service
            action_catalog: Fixed action rewards
            clock: Clock and calendar-day boundary
            user_locks: Application-wide per-user locks
            transaction: Savepoints inside the request transaction
        """
        self.action_repository = action_repository
        self.user_repository = user_repository
        self.badge_service = badge_service
        self.action_catalog = action_catalog
        self.clock = clock
        self.user_locks = user_locks
        self.transaction = transaction

    def validate_batch(
        self, submissions: Sequence[ActionSubmission]
    ) -> list[AcceptedAction]:
        """Check every submitted action against the catalog.

        One bad entry rejects the whole batch.

        Args:
            submissions: Submitted actions

        Returns:
            Accepted actions in submission order

        Raises:
            ValidationError: If the batch is empty or any entry is invalid
        """
        if not submissions:
            raise ValidationError(
                "Invalid data",
                errors=[{"loc": ["actions"], "msg": "At least one action is required"}],
            )

        accepted = []
        errors = []
        for index, submission in enumerate(submissions):
            action_type = (
                self.action_catalog.parse(submission.type)
                if isinstance(submission.type, str)
                else None
            )
            if action_type is None:
                errors.append(
                    {
                        "loc": ["actions", index, "type"],
                        "msg": "Invalid action type",
                        "value": submission.type,
                    }
                )
                continue

            notes = submission.notes if submission.notes is not None else ""
            if not isinstance(notes, str) or len(notes) > MAX_NOTES_LENGTH:
                errors.append(
                    {
                        "loc": ["actions", index, "notes"],
                        "msg": f"Notes must be a string of at most {MAX_NOTES_LENGTH} characters",
                    }
                )
                continue

            accepted.append(AcceptedAction(type=action_type, notes=notes))

        if errors:
            raise ValidationError("Invalid data", errors=errors)

        return accepted

    async def filter_new_actions(
        self, user_id: UserId, actions: Sequence[AcceptedAction], day_start: datetime
    ) -> list[AcceptedAction]:
        """Drop standard actions already logged on the current day.

        A standard type is kept at most once: its first occurrence in the
        batch, and only if no record of that type exists since ``day_start``.
        Custom actions are always kept.

        Args:
            user_id: User ID
            actions: Validated actions
            day_start: Start of the current calendar day

        Returns:
            Surviving actions in submission order
        """
        standard_types = {a.type for a in actions if a.type != ActionType.CUSTOM}
        already_logged: set[ActionType] = set()
        if standard_types:
            already_logged = await self.action_repository.find_types_logged_since(
                user_id, day_start, standard_types
            )

        surviving = []
        seen: set[ActionType] = set()
        for action in actions:
            if action.type == ActionType.CUSTOM:
                surviving.append(action)
                continue
            if action.type in already_logged or action.type in seen:
                continue
            seen.add(action.type)
            surviving.append(action)

        if len(surviving) < len(actions):
            logfire.info(
                "Duplicate actions skipped",
                user_id=str(user_id),
                skipped=len(actions) - len(surviving),
            )

        return surviving

    async def log_actions(
        self, user_id: UserId, submissions: Sequence[ActionSubmission]
    ) -> LogActionsResult:
        """Log a batch of actions and update points, streak and badges.

        Steps:
        1. Validate the batch (nothing is written on failure)
        2. Drop standard actions already logged today
        3. Save one record per surviving action with catalog values
        4. Add the points and advance the streak once for the whole batch
        5. Award newly earned badges (failures are logged, not raised)

        Args:
            user_id: Authenticated user ID
            submissions: Submitted actions

        Returns:
            Saved records, newly unlocked badges and accrual stats

        Raises:
            ValidationError: If any submitted action is invalid
            NotFoundError: If the user does not exist
            NoNewActionsError: If every action was already logged today
        """
        with logfire.span(
            "action_service.log_actions",
            user_id=str(user_id),
            submitted=len(submissions),
        ):
            accepted = self.validate_batch(submissions)

            async with self.user_locks.hold(user_id):
                user = await self.user_repository.find_by_id_for_update(user_id)
                if not user:
                    logfire.warn("Log actions for unknown user", user_id=str(user_id))
                    raise NotFoundError("User", str(user_id))

                now = self.clock.now()
                surviving = await self.filter_new_actions(
                    user_id, accepted, self.clock.start_of_day(self.clock.day_of(now))
                )
                if not surviving:
                    logfire.info("No new actions to log", user_id=str(user_id))
                    raise NoNewActionsError()

                records = [self._new_record(user_id, action, now) for action in surviving]
                saved = await self.action_repository.save_all(records)

                points_earned = sum((r.points for r in saved), Decimal("0"))
                carbon_saved = sum((r.carbon_saved for r in saved), Decimal("0"))

                streak = compute_streak(
                    user.last_action_date,
                    user.current_streak,
                    user.longest_streak,
                    now,
                    self.clock.day_of,
                )
                user = await self.user_repository.apply_accrual(
                    user_id,
                    points=points_earned,
                    current_streak=streak.current_streak,
                    longest_streak=streak.longest_streak,
                    last_action_date=now,
                )

                new_badges = await self._award_badges(user)

            logfire.info(
                "Actions logged",
                user_id=str(user_id),
                actions_added=len(saved),
                points_earned=float(points_earned),
                current_streak=user.current_streak,
                new_badges=len(new_badges),
            )

            return LogActionsResult(
                saved_actions=saved,
                new_badges=new_badges,
                stats=AccrualStats(
                    total_points=user.total_points,
                    actions_added=len(saved),
                    current_streak=user.current_streak,
                    longest_streak=user.longest_streak,
                    points_earned=points_earned,
                    carbon_saved=carbon_saved,
                ),
            )

    async def get_history(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 50,
        page: int = 1,
    ) -> tuple[list[ActionRecord], int]:
        """Get a page of the user's records, newest first.

        Args:
            user_id: User ID
            start: Inclusive lower bound on the record date
            end: Exclusive upper bound on the record date
            limit: Page size
            page: 1-based page number

        Returns:
            (records on the page, total matching records)
        """
        with logfire.span(
            "action_service.get_history", user_id=str(user_id), page=page, limit=limit
        ):
            records = await self.action_repository.find_by_user(
                user_id, start=start, end=end, limit=limit, offset=(page - 1) * limit
            )
            total = await self.action_repository.count_by_user(
                user_id, start=start, end=end
            )
            return records, total

    async def get_today(self, user_id: UserId) -> list[ActionRecord]:
        """Get the user's records for the current calendar day."""
        with logfire.span("action_service.get_today", user_id=str(user_id)):
            today = self.clock.day_of(self.clock.now())
            return await self.action_repository.find_by_user_in_range(
                user_id, self.clock.start_of_day(today), self.clock.end_of_day(today)
            )

    def _new_record(
        self, user_id: UserId, action: AcceptedAction, now: datetime
    ) -> ActionRecord:
        value = self.action_catalog.value_of(action.type)
        return ActionRecord(
            id=ActionId(uuid4()),
            user_id=user_id,
            type=action.type,
            points=value.points,
            carbon_saved=value.carbon_saved,
            notes=action.notes,
            date=now,
        )

    async def _award_badges(self, user: User) -> list[Badge]:
        # Points and streak are already written; a badge failure must not undo them
        try:
            async with self.transaction.savepoint():
                new_badges = await self.badge_service.evaluate_badges(user)
        except Exception as e:
            logfire.error(
                "Badge evaluation failed",
                user_id=str(user.id),
                error=str(e),
                error_type=type(e).__name__,
            )
            return []
        return new_badges
