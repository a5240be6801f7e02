"""Liveness check."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from eco import __version__
from eco.config import Settings
from eco.util.clock import Clock

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], clock: FromDishka[Clock]
) -> HealthResponse:
    """Report that the process is up. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        timestamp=clock.now(),
        version=__version__,
        git_sha=settings.git_sha,
        environment=settings.environment,
    )
