"""Get leaderboard use case."""

from pydantic import BaseModel, Field

from eco.config import CommunitySettings
from eco.domain.model import LeaderboardEntry
from eco.domain.service import CommunityService


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    limit: int | None = Field(default=None, ge=1)  # Defaults to the configured size


class GetLeaderboardResponse(BaseModel):
    """Ranked users."""

    success: bool = True
    leaderboard: list[LeaderboardEntry]


class GetLeaderboardUseCase:
    """Use case for the points leaderboard."""

    def __init__(
        self, community_service: CommunityService, settings: CommunitySettings
    ) -> None:
        self.community_service = community_service
        self.settings = settings

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        limit = min(
            request.limit or self.settings.leaderboard_size,
            self.settings.leaderboard_max_size,
        )
        return GetLeaderboardResponse(
            leaderboard=await self.community_service.get_leaderboard(limit)
        )
