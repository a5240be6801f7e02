"""Get today's actions use case."""

from uuid import UUID

from pydantic import BaseModel

from eco.domain.service import ActionService
from eco.domain.value import ActionType, UserId

from .common import ActionItem


class GetTodayActionsResponse(BaseModel):
    """Today's records and the types already done today."""

    success: bool = True
    actions: list[ActionItem]
    completed: list[ActionType]  # Distinct, in first-logged order


class GetTodayActionsUseCase:
    """Use case for the current day's records."""

    def __init__(self, action_service: ActionService) -> None:
        self.action_service = action_service

    async def execute(self, user_id: str) -> GetTodayActionsResponse:
        records = await self.action_service.get_today(UserId(UUID(user_id)))
        return GetTodayActionsResponse(
            actions=[ActionItem.from_record(r) for r in records],
            completed=list(dict.fromkeys(r.type for r in records)),
        )
