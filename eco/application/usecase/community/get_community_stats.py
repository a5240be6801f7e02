"""Get community stats use case."""

from pydantic import BaseModel

from eco.domain.model import CommunityStats
from eco.domain.service import CommunityService


class GetCommunityStatsResponse(BaseModel):
    """Community-wide totals."""

    success: bool = True
    stats: CommunityStats


class GetCommunityStatsUseCase:
    """Use case for the community totals shown on the community board."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self) -> GetCommunityStatsResponse:
        return GetCommunityStatsResponse(
            stats=await self.community_service.get_stats()
        )
