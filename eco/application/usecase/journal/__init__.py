"""Journal use cases."""

from .get_journal import GetJournalRequest, GetJournalResponse, GetJournalUseCase
from .get_journal_day import (
    GetJournalDayRequest,
    GetJournalDayResponse,
    GetJournalDayUseCase,
)
from .save_reflection import (
    SaveReflectionRequest,
    SaveReflectionResponse,
    SaveReflectionUseCase,
)

__all__ = [
    "GetJournalRequest",
    "GetJournalResponse",
    "GetJournalUseCase",
    "GetJournalDayRequest",
    "GetJournalDayResponse",
    "GetJournalDayUseCase",
    "SaveReflectionRequest",
    "SaveReflectionResponse",
    "SaveReflectionUseCase",
]
