"""Get user badges use case."""

from uuid import UUID

from pydantic import BaseModel

from eco.application.usecase.action.common import BadgeItem
from eco.domain.service import BadgeService, UserService
from eco.domain.value import UserId


class UserBadgeItem(BadgeItem):
    """Badge with the user's standing against it."""

    is_unlocked: bool
    progress: int | float | None = None  # Omitted once unlocked
    target: int


class UserBadgeStats(BaseModel):
    """User counters shown next to the badge cabinet."""

    total_badges: int
    current_streak: int
    longest_streak: int
    total_points: float


class GetUserBadgesResponse(BaseModel):
    """Get user badges response."""

    success: bool = True
    badges: list[UserBadgeItem]
    stats: UserBadgeStats


class GetUserBadgesUseCase:
    """Use case for a user's badge cabinet with progress."""

    def __init__(self, user_service: UserService, badge_service: BadgeService) -> None:
        """Initialize get user badges use case.

        Args:
            user_service: User domain service
            badge_service: Badge domain service
        """
        self.user_service = user_service
        self.badge_service = badge_service

    async def execute(self, user_id: str) -> GetUserBadgesResponse:
        """Execute get user badges flow.

        Args:
            user_id: Authenticated user ID

        Returns:
            Every badge with unlock state and progress

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.require(UserId(UUID(user_id)))
        progress = await self.badge_service.get_badge_progress(user)

        return GetUserBadgesResponse(
            badges=[
                UserBadgeItem(
                    **BadgeItem.from_badge(p.badge).model_dump(),
                    is_unlocked=p.is_unlocked,
                    progress=p.progress,
                    target=p.target,
                )
                for p in progress
            ],
            stats=UserBadgeStats(
                total_badges=len(user.badges),
                current_streak=user.current_streak,
                longest_streak=user.longest_streak,
                total_points=float(user.total_points),
            ),
        )
