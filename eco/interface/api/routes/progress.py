"""Personal progress routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from eco.application.usecase.progress import (
    GetMonthlyProgressRequest,
    GetMonthlyProgressResponse,
    GetMonthlyProgressUseCase,
    GetProgressResponse,
    GetProgressUseCase,
)
from eco.domain.service import JWTService
from eco.interface.api.auth import require_user_id

router = APIRouter(prefix="/progress", tags=["progress"], route_class=DishkaRoute)


@router.get("", response_model=GetProgressResponse)
async def get_progress(
    get_progress_use_case: FromDishka[GetProgressUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetProgressResponse:
    """Get the current user's progress dashboard.

    Args:
        get_progress_use_case: Progress use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Totals, streak, this year's months, impact areas and badge progress
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_progress_use_case.execute(user_id)


@router.get("/monthly", response_model=GetMonthlyProgressResponse)
async def get_monthly_progress(
    get_monthly_progress_use_case: FromDishka[GetMonthlyProgressUseCase],
    jwt_service: FromDishka[JWTService],
    year: int | None = Query(default=None, ge=1970, le=9998),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetMonthlyProgressResponse:
    """Get one year of the current user's activity, month by month."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    request = GetMonthlyProgressRequest(user_id=user_id, year=year)
    return await get_monthly_progress_use_case.execute(request)
