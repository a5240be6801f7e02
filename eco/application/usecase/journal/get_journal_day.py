"""Get journal day use case."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel

from eco.application.usecase.action.common import ActionItem
from eco.domain.service import JournalService
from eco.domain.value import UserId


class GetJournalDayRequest(BaseModel):
    """Get journal day request."""

    user_id: str
    day: date


class JournalDayStats(BaseModel):
    """Totals for one day."""

    total_points: float
    total_carbon_saved: float
    action_count: int


class GetJournalDayResponse(BaseModel):
    """Get journal day response."""

    success: bool = True
    date: date
    actions: list[ActionItem]
    stats: JournalDayStats


class GetJournalDayUseCase:
    """Use case for one day of a user's impact journal."""

    def __init__(self, journal_service: JournalService) -> None:
        self.journal_service = journal_service

    async def execute(self, request: GetJournalDayRequest) -> GetJournalDayResponse:
        """Execute get journal day flow.

        Args:
            request: Get journal day request

        Returns:
            The day's records, oldest first, with totals
        """
        day = await self.journal_service.get_day(
            UserId(UUID(request.user_id)), request.day
        )
        return GetJournalDayResponse(
            date=day.day,
            actions=[ActionItem.from_record(a) for a in day.actions],
            stats=JournalDayStats(
                total_points=float(day.total_points),
                total_carbon_saved=float(day.total_carbon_saved),
                action_count=day.action_count,
            ),
        )
