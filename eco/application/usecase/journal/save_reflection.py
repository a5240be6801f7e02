"""Save reflection use case."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from eco.application.usecase.action.common import ActionItem
from eco.application.usecase.base import BaseUseCase
from eco.domain.service import JournalService
from eco.domain.value import UserId


class SaveReflectionRequest(BaseModel):
    """Save reflection request."""

    user_id: str
    day: date
    reflection: str = Field(max_length=5000)


class SaveReflectionResponse(BaseModel):
    """Save reflection response."""

    success: bool = True
    reflection: ActionItem


class SaveReflectionUseCase(BaseUseCase):
    """Use case for writing the reflection of a journal day."""

    def __init__(self, journal_service: JournalService) -> None:
        self.journal_service = journal_service

    async def execute(self, request: SaveReflectionRequest) -> SaveReflectionResponse:
        record = await self.journal_service.save_reflection(
            UserId(UUID(request.user_id)), request.day, request.reflection
        )
        return SaveReflectionResponse(reflection=ActionItem.from_record(record))
