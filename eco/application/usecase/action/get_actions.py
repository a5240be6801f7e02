"""Get action history use case."""

import math
from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from eco.application.usecase.base import BaseUseCase
from eco.config import AccrualSettings
from eco.domain.service import ActionService
from eco.domain.value import UserId
from eco.util.clock import Clock

from .common import ActionItem, Pagination


class GetActionsRequest(BaseModel):
    """Get action history request."""

    user_id: str
    start_date: date | None = None  # Inclusive calendar day
    end_date: date | None = None  # Inclusive calendar day
    limit: int | None = Field(default=None, ge=1)  # Defaults to the configured page size
    page: int = Field(default=1, ge=1)


class GetActionsResponse(BaseModel):
    """Get action history response."""

    success: bool = True
    actions: list[ActionItem]
    pagination: Pagination


class GetActionsUseCase(BaseUseCase):
    """Use case for paging through a user's action history."""

    def __init__(
        self, action_service: ActionService, clock: Clock, settings: AccrualSettings
    ) -> None:
        self.action_service = action_service
        self.clock = clock
        self.settings = settings

    async def execute(self, request: GetActionsRequest) -> GetActionsResponse:
        """Execute get action history flow.

        Args:
            request: Get action history request

        Returns:
            One page of records, newest first
        """
        limit = min(
            request.limit or self.settings.history_default_limit,
            self.settings.history_max_limit,
        )
        start = (
            self.clock.start_of_day(request.start_date) if request.start_date else None
        )
        end = self.clock.end_of_day(request.end_date) if request.end_date else None

        records, total = await self.action_service.get_history(
            UserId(UUID(request.user_id)),
            start=start,
            end=end,
            limit=limit,
            page=request.page,
        )

        return GetActionsResponse(
            actions=[ActionItem.from_record(r) for r in records],
            pagination=Pagination(
                total=total,
                page=request.page,
                limit=limit,
                pages=math.ceil(total / limit),
            ),
        )
