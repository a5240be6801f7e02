"""Impact journal routes."""

import re
from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel, Field

from eco.application.usecase.journal import (
    GetJournalRequest,
    GetJournalResponse,
    GetJournalUseCase,
    GetJournalDayRequest,
    GetJournalDayResponse,
    GetJournalDayUseCase,
    SaveReflectionRequest,
    SaveReflectionResponse,
    SaveReflectionUseCase,
)
from eco.domain.error import ValidationError
from eco.domain.service import JWTService
from eco.interface.api.auth import require_user_id

router = APIRouter(prefix="/journal", tags=["journal"], route_class=DishkaRoute)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
INVALID_DATE_MSG = "Invalid date format. Use YYYY-MM-DD"


class ReflectionBody(BaseModel):
    """Request body for saving a reflection."""

    reflection: str = Field(max_length=5000)


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` path segment.

    Raises:
        ValidationError: If the value is not a valid calendar date
    """
    if not DATE_PATTERN.match(value):
        raise ValidationError(INVALID_DATE_MSG)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(INVALID_DATE_MSG)


@router.get("", response_model=GetJournalResponse)
async def get_journal(
    get_journal_use_case: FromDishka[GetJournalUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetJournalResponse:
    """Page through the current user's journal, one entry per active day.

    Args:
        get_journal_use_case: Journal overview use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Days per page
        page: 1-based page number
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Days newest first, lifetime totals and pagination metadata
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    request = GetJournalRequest(user_id=user_id, limit=limit, page=page)
    return await get_journal_use_case.execute(request)


@router.get("/{day}", response_model=GetJournalDayResponse)
async def get_journal_day(
    day: str,
    get_journal_day_use_case: FromDishka[GetJournalDayUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetJournalDayResponse:
    """Get the current user's records for one day, oldest first.

    Args:
        day: Calendar day as YYYY-MM-DD
        get_journal_day_use_case: Journal day use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Records and day totals
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    request = GetJournalDayRequest(user_id=user_id, day=parse_day(day))
    return await get_journal_day_use_case.execute(request)


@router.post("/{day}/reflection", response_model=SaveReflectionResponse)
async def save_reflection(
    day: str,
    body: ReflectionBody,
    save_reflection_use_case: FromDishka[SaveReflectionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SaveReflectionResponse:
    """Create or replace the current user's reflection for a day.

    Reflections earn no points and do not affect the streak.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    request = SaveReflectionRequest(
        user_id=user_id, day=parse_day(day), reflection=body.reflection
    )
    return await save_reflection_use_case.execute(request)
