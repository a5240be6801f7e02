"""Get monthly progress use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from eco.application.usecase.base import BaseUseCase
from eco.domain.service import ProgressService
from eco.domain.value import UserId

from .common import MonthItem


class GetMonthlyProgressRequest(BaseModel):
    """Get monthly progress request."""

    user_id: str
    year: int | None = Field(default=None, ge=1970, le=9998)  # Defaults to this year


class GetMonthlyProgressResponse(BaseModel):
    """Get monthly progress response."""

    success: bool = True
    year: int
    progress_by_month: list[MonthItem]


class GetMonthlyProgressUseCase(BaseUseCase):
    """Use case for one year of a user's activity, month by month."""

    def __init__(self, progress_service: ProgressService) -> None:
        self.progress_service = progress_service

    async def execute(
        self, request: GetMonthlyProgressRequest
    ) -> GetMonthlyProgressResponse:
        year = request.year or self.progress_service.today().year
        months = await self.progress_service.get_monthly(
            UserId(UUID(request.user_id)), year
        )
        return GetMonthlyProgressResponse(
            year=year, progress_by_month=[MonthItem.from_totals(m) for m in months]
        )
