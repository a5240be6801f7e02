"""Get progress dashboard use case."""

from uuid import UUID

from pydantic import BaseModel

from eco.application.usecase.action.common import BadgeItem, StreakItem
from eco.application.usecase.badge.get_user_badges import UserBadgeItem
from eco.domain.service import BadgeService, ProgressService, UserService
from eco.domain.value import UserId

from .common import CategoryItem, MonthItem


class GetProgressResponse(BaseModel):
    """Get progress dashboard response."""

    success: bool = True
    total_points: float
    total_actions: int
    total_carbon_saved: float
    streak: StreakItem
    progress_by_month: list[MonthItem]
    impact_by_category: list[CategoryItem]
    badges: list[UserBadgeItem]


class GetProgressUseCase:
    """Use case for everything the progress dashboard shows, in one call."""

    def __init__(
        self,
        user_service: UserService,
        progress_service: ProgressService,
        badge_service: BadgeService,
    ) -> None:
        """Initialize get progress use case.

        Args:
            user_service: User domain service
            progress_service: Progress domain service
            badge_service: Badge domain service
        """
        self.user_service = user_service
        self.progress_service = progress_service
        self.badge_service = badge_service

    async def execute(self, user_id: str) -> GetProgressResponse:
        """Execute get progress flow.

        Args:
            user_id: Authenticated user ID

        Returns:
            Lifetime totals, streak, this year's months, impact areas and badges

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.require(UserId(UUID(user_id)))
        stats = await self.progress_service.get_action_stats(user.id)
        months = await self.progress_service.get_monthly(
            user.id, self.progress_service.today().year
        )
        categories = self.progress_service.impact_by_category(stats.by_type)
        badges = await self.badge_service.get_badge_progress(user)

        return GetProgressResponse(
            total_points=float(stats.total_points),
            total_actions=stats.total_actions,
            total_carbon_saved=float(stats.total_carbon_saved),
            streak=StreakItem(current=user.current_streak, longest=user.longest_streak),
            progress_by_month=[MonthItem.from_totals(m) for m in months],
            impact_by_category=[CategoryItem.from_totals(c) for c in categories],
            badges=[
                UserBadgeItem(
                    **BadgeItem.from_badge(p.badge).model_dump(),
                    is_unlocked=p.is_unlocked,
                    progress=p.progress,
                    target=p.target,
                )
                for p in badges
            ],
        )
