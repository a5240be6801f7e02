"""Community use cases."""

from .get_community_stats import GetCommunityStatsResponse, GetCommunityStatsUseCase
from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
)

__all__ = [
    "GetCommunityStatsResponse",
    "GetCommunityStatsUseCase",
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
]
