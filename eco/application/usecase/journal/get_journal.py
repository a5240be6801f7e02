"""Get journal overview use case."""

import math
from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from eco.application.usecase.action.common import ActionItem, Pagination
from eco.application.usecase.base import BaseUseCase
from eco.config import AccrualSettings
from eco.domain.service import JournalService
from eco.domain.value import UserId


class GetJournalRequest(BaseModel):
    """Get journal overview request."""

    user_id: str
    limit: int | None = Field(default=None, ge=1)  # Days per page
    page: int = Field(default=1, ge=1)


class JournalEntry(BaseModel):
    """One active day of the journal."""

    date: date
    actions: list[ActionItem]
    total_points: float
    total_carbon_saved: float
    action_count: int


class JournalLifetimeStats(BaseModel):
    """Totals over every record of the user."""

    total_points: float
    total_carbon_saved: float
    total_actions: int


class GetJournalResponse(BaseModel):
    """Get journal overview response."""

    success: bool = True
    entries: list[JournalEntry]
    stats: JournalLifetimeStats
    pagination: Pagination


class GetJournalUseCase(BaseUseCase):
    """Use case for paging through a user's journal, one entry per day."""

    def __init__(
        self, journal_service: JournalService, settings: AccrualSettings
    ) -> None:
        self.journal_service = journal_service
        self.settings = settings

    async def execute(self, request: GetJournalRequest) -> GetJournalResponse:
        """Execute get journal overview flow.

        Args:
            request: Get journal overview request

        Returns:
            One page of days, newest first, with lifetime totals
        """
        limit = min(
            request.limit or self.settings.journal_default_limit,
            self.settings.journal_max_limit,
        )
        overview = await self.journal_service.get_overview(
            UserId(UUID(request.user_id)),
            limit=limit,
            offset=(request.page - 1) * limit,
        )

        return GetJournalResponse(
            entries=[
                JournalEntry(
                    date=day.day,
                    actions=[ActionItem.from_record(a) for a in day.actions],
                    total_points=float(day.total_points),
                    total_carbon_saved=float(day.total_carbon_saved),
                    action_count=day.action_count,
                )
                for day in overview.days
            ],
            stats=JournalLifetimeStats(
                total_points=float(overview.total_points),
                total_carbon_saved=float(overview.total_carbon_saved),
                total_actions=overview.total_actions,
            ),
            pagination=Pagination(
                total=overview.total_days,
                page=request.page,
                limit=limit,
                pages=math.ceil(overview.total_days / limit),
            ),
        )
