"""Action routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel, Field

from eco.application.usecase.action import (
    GetActionStatsResponse,
    GetActionStatsUseCase,
    GetActionsRequest,
    GetActionsResponse,
    GetActionsUseCase,
    GetTodayActionsResponse,
    GetTodayActionsUseCase,
    LogActionsRequest,
    LogActionsResponse,
    LogActionsUseCase,
    SubmittedAction,
)
from eco.domain.service import JWTService
from eco.interface.api.auth import require_user_id

router = APIRouter(prefix="/actions", tags=["actions"], route_class=DishkaRoute)


class LogActionsBody(BaseModel):
    """Request body for logging actions."""

    actions: list[SubmittedAction] = Field(default_factory=list)


@router.post("", response_model=LogActionsResponse)
async def log_actions(
    body: LogActionsBody,
    log_actions_use_case: FromDishka[LogActionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LogActionsResponse:
    """Log a batch of eco-actions for the current user.

    Standard action types already logged today are skipped; custom actions
    are always recorded. Points, streak and badges are updated once for the
    whole batch.

    Args:
        body: Actions to log
        log_actions_use_case: Log actions use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Saved records, new badges and updated counters
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    request = LogActionsRequest(user_id=user_id, actions=body.actions)
    return await log_actions_use_case.execute(request)


@router.get("", response_model=GetActionsResponse)
async def get_actions(
    get_actions_use_case: FromDishka[GetActionsUseCase],
    jwt_service: FromDishka[JWTService],
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetActionsResponse:
    """Page through the current user's action history, newest first.

    Args:
        get_actions_use_case: Action history use case from DI
        jwt_service: JWT service for token verification (injected)
        start_date: First calendar day to include
        end_date: Last calendar day to include
        limit: Page size
        page: 1-based page number
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        One page of records with pagination metadata
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    request = GetActionsRequest(
        user_id=user_id,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        page=page,
    )
    return await get_actions_use_case.execute(request)


@router.get("/today", response_model=GetTodayActionsResponse)
async def get_today_actions(
    get_today_actions_use_case: FromDishka[GetTodayActionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetTodayActionsResponse:
    """Get the current user's records for today."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_today_actions_use_case.execute(user_id)


@router.get("/stats", response_model=GetActionStatsResponse)
async def get_action_stats(
    get_action_stats_use_case: FromDishka[GetActionStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetActionStatsResponse:
    """Get the current user's totals, per-type counts, recent days and streak."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_action_stats_use_case.execute(user_id)
