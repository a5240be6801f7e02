"""List badges use case."""

from pydantic import BaseModel

from eco.application.usecase.action.common import BadgeItem
from eco.domain.service import BadgeService


class ListBadgesResponse(BaseModel):
    """All badge definitions."""

    success: bool = True
    badges: list[BadgeItem]


class ListBadgesUseCase:
    """Use case for listing every badge that can be earned."""

    def __init__(self, badge_service: BadgeService) -> None:
        self.badge_service = badge_service

    async def execute(self) -> ListBadgesResponse:
        badges = await self.badge_service.get_all_badges()
        return ListBadgesResponse(badges=[BadgeItem.from_badge(b) for b in badges])
