"""Get personal action stats use case."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel

from eco.domain.service import ProgressService, UserService
from eco.domain.value import UserId

from .common import StreakItem, TypeTotalsItem


class DailyItem(BaseModel):
    """Records of one calendar day, summed."""

    date: date
    count: int
    points: float
    carbon_saved: float


class ActionStatsItem(BaseModel):
    """A user's lifetime totals and recent activity."""

    total_actions: int
    total_points: float
    total_carbon_saved: float
    actions_by_type: list[TypeTotalsItem]
    daily_actions: list[DailyItem]
    streak: StreakItem


class GetActionStatsResponse(BaseModel):
    """Get action stats response."""

    success: bool = True
    stats: ActionStatsItem


class GetActionStatsUseCase:
    """Use case for the authenticated user's personal action stats."""

    def __init__(
        self, user_service: UserService, progress_service: ProgressService
    ) -> None:
        self.user_service = user_service
        self.progress_service = progress_service

    async def execute(self, user_id: str) -> GetActionStatsResponse:
        """Execute get action stats flow.

        Args:
            user_id: Authenticated user ID

        Returns:
            Totals, per-type totals busiest first, active recent days and streak

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.require(UserId(UUID(user_id)))
        stats = await self.progress_service.get_action_stats(user.id)

        return GetActionStatsResponse(
            stats=ActionStatsItem(
                total_actions=stats.total_actions,
                total_points=float(stats.total_points),
                total_carbon_saved=float(stats.total_carbon_saved),
                actions_by_type=[TypeTotalsItem.from_totals(t) for t in stats.by_type],
                daily_actions=[
                    DailyItem(
                        date=date.fromisoformat(d.label),
                        count=d.count,
                        points=float(d.points),
                        carbon_saved=float(d.carbon_saved),
                    )
                    for d in stats.daily
                ],
                streak=StreakItem(
                    current=user.current_streak, longest=user.longest_streak
                ),
            )
        )
