"""Community routes (public)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from eco.application.usecase.community import (
    GetCommunityStatsResponse,
    GetCommunityStatsUseCase,
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)

router = APIRouter(prefix="/community", tags=["community"], route_class=DishkaRoute)


@router.get("/stats", response_model=GetCommunityStatsResponse)
async def get_community_stats(
    get_community_stats_use_case: FromDishka[GetCommunityStatsUseCase],
) -> GetCommunityStatsResponse:
    """Community-wide totals, per-type breakdown and weekly activity."""
    return await get_community_stats_use_case.execute()


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    limit: int | None = Query(default=None, ge=1),
) -> GetLeaderboardResponse:
    """Users ranked by total points, ties by username.

    Args:
        get_leaderboard_use_case: Leaderboard use case from DI
        limit: Number of entries (defaults to the configured size)

    Returns:
        Ranked entries
    """
    return await get_leaderboard_use_case.execute(GetLeaderboardRequest(limit=limit))
