"""Badge routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from eco.application.usecase.badge import (
    GetUserBadgesResponse,
    GetUserBadgesUseCase,
    ListBadgesResponse,
    ListBadgesUseCase,
)
from eco.domain.service import JWTService
from eco.interface.api.auth import require_user_id

router = APIRouter(prefix="/badges", tags=["badges"], route_class=DishkaRoute)


@router.get("", response_model=ListBadgesResponse)
async def list_badges(
    list_badges_use_case: FromDishka[ListBadgesUseCase],
) -> ListBadgesResponse:
    """List every badge, ordered by kind then requirement.

    Public endpoint.
    """
    return await list_badges_use_case.execute()


@router.get("/me", response_model=GetUserBadgesResponse)
async def get_my_badges(
    get_user_badges_use_case: FromDishka[GetUserBadgesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetUserBadgesResponse:
    """Get the current user's badges with unlock state and progress.

    Args:
        get_user_badges_use_case: User badges use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Badges with progress and the user's counters
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await get_user_badges_use_case.execute(user_id)
