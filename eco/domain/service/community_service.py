"""Community aggregates domain service."""

from datetime import timedelta

import logfire

from eco.domain.model import (
    CommunitySnapshot,
    CommunityStats,
    LeaderboardEntry,
    WeeklyStats,
)
from eco.domain.model.community import MOST_POPULAR_SENTINEL
from eco.domain.repository import ActionRepository, UserRepository
from eco.util.clock import Clock

from .base import Service


class CommunityService(Service):
    """Recomputes community-wide stats and the leaderboard from scratch.

    Nothing is cached: every call reflects the store at that moment.
    """

    def __init__(
        self,
        action_repository: ActionRepository,
        user_repository: UserRepository,
        clock: Clock,
        weekly_window_days: int = 7,
        leaderboard_size: int = 10,
    ) -> None:
        """Initialize community service.

        Args:
            action_repository: Action repository
            user_repository: User repository
            clock: Clock for the trailing window
            weekly_window_days: Length of the "this week" window
            leaderboard_size: Default number of leaderboard entries
        """
        self.action_repository = action_repository
        self.user_repository = user_repository
        self.clock = clock
        self.weekly_window_days = weekly_window_days
        self.leaderboard_size = leaderboard_size

    async def get_stats(self) -> CommunityStats:
        """Compute community totals."""
        with logfire.span("community_service.get_stats"):
            total_users = await self.user_repository.count()
            total_actions, total_carbon_saved = (
                await self.action_repository.aggregate_totals()
            )
            actions_by_type = await self.action_repository.aggregate_by_type()

            since = self.clock.now() - timedelta(days=self.weekly_window_days)
            actions_this_week = await self.action_repository.count_since(since)

            most_popular = (
                actions_by_type[0].name if actions_by_type else MOST_POPULAR_SENTINEL
            )

            return CommunityStats(
                total_users=total_users,
                total_actions=total_actions,
                total_carbon_saved=total_carbon_saved,
                actions_by_type=actions_by_type,
                weekly=WeeklyStats(
                    actions_this_week=actions_this_week,
                    most_popular_habit=most_popular,
                ),
            )

    async def get_leaderboard(self, limit: int | None = None) -> list[LeaderboardEntry]:
        """Rank users by total points.

        Ties are broken by username, ascending.

        Args:
            limit: Number of entries (defaults to the configured size)

        Returns:
            Ranked entries, rank starting at 1
        """
        limit = limit or self.leaderboard_size
        with logfire.span("community_service.get_leaderboard", limit=limit):
            users = await self.user_repository.find_top_by_points(limit)
            return [
                LeaderboardEntry(
                    username=user.username.root,
                    points=user.total_points,
                    streak=user.current_streak,
                    rank=index + 1,
                )
                for index, user in enumerate(users)
            ]

    async def get_snapshot(self) -> CommunitySnapshot:
        """Stats and default-size leaderboard together."""
        with logfire.span("community_service.get_snapshot"):
            return CommunitySnapshot(
                stats=await self.get_stats(),
                leaderboard=await self.get_leaderboard(),
            )
