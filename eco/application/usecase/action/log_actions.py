"""Log actions use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from eco.application.usecase.base import BaseUseCase
from eco.domain.event import CommunityStatsUpdated, EventPublisher
from eco.domain.repository import TransactionManager
from eco.domain.service import ActionService, ActionSubmission, CommunityService
from eco.domain.value import UserId

from .common import ActionItem, BadgeItem


class SubmittedAction(BaseModel):
    """One action in a log request.

    Type and notes are checked against the action catalog by the domain, so
    an unknown type yields "Invalid action type" rather than a schema error.
    """

    type: str
    notes: str | None = None


class LogActionsRequest(BaseModel):
    """Log actions request."""

    user_id: str  # User ID from authenticated user
    actions: list[SubmittedAction] = Field(default_factory=list)


class LogActionsStats(BaseModel):
    """Counters after the transaction."""

    total_points: float
    actions_added: int
    current_streak: int
    longest_streak: int
    points_earned: float
    carbon_saved: float


class LogActionsResponse(BaseModel):
    """Log actions response."""

    success: bool = True
    actions: list[ActionItem]
    new_badges: list[BadgeItem]
    stats: LogActionsStats


class LogActionsUseCase(BaseUseCase):
    """Use case for logging a batch of eco-actions."""

    def __init__(
        self,
        action_service: ActionService,
        community_service: CommunityService,
        event_publisher: EventPublisher,
        transaction: TransactionManager,
    ) -> None:
        """Initialize log actions use case.

        Args:
            action_service: Action domain service
            community_service: Community aggregates service
            event_publisher: Publisher for community updates
            transaction: Savepoints inside the request transaction
        """
        self.action_service = action_service
        self.community_service = community_service
        self.event_publisher = event_publisher
        self.transaction = transaction

    async def execute(self, request: LogActionsRequest) -> LogActionsResponse:
        """Execute log actions flow.

        Steps:
        1. Run the logging transaction (records, points, streak, badges)
        2. Recompute community aggregates and publish them

        Args:
            request: Log actions request

        Returns:
            Saved records, newly unlocked badges and counters

        Raises:
            ValidationError: If any action is invalid or the batch is empty
            NoNewActionsError: If every action was already logged today
            NotFoundError: If the user does not exist
        """
        user_id = UserId(UUID(request.user_id))

        result = await self.action_service.log_actions(
            user_id,
            [ActionSubmission(type=a.type, notes=a.notes) for a in request.actions],
        )

        await self._publish_community_update()

        stats = result.stats
        return LogActionsResponse(
            actions=[ActionItem.from_record(r) for r in result.saved_actions],
            new_badges=[BadgeItem.from_badge(b) for b in result.new_badges],
            stats=LogActionsStats(
                total_points=float(stats.total_points),
                actions_added=stats.actions_added,
                current_streak=stats.current_streak,
                longest_streak=stats.longest_streak,
                points_earned=float(stats.points_earned),
                carbon_saved=float(stats.carbon_saved),
            ),
        )

    async def _publish_community_update(self) -> None:
        # The logged actions stand even if the broadcast cannot be built
        try:
            async with self.transaction.savepoint():
                snapshot = await self.community_service.get_snapshot()
            self.event_publisher.publish(CommunityStatsUpdated(snapshot=snapshot))
        except Exception as e:
            logfire.error(
                "Community stats broadcast failed",
                error=str(e),
                error_type=type(e).__name__,
            )
