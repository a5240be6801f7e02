"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eco import __version__
from eco.config import Settings
from eco.domain.service import BadgeService
from eco.interface.api.routes import (
    actions,
    badges,
    community,
    health,
    journal,
    progress,
    realtime,
)
from eco.interface.error import register_exception_handlers
from eco.util.di.container import create_container, setup_di
from eco.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    actions.router,
    badges.router,
    community.router,
    journal.router,
    progress.router,
    realtime.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed badge definitions on startup and close the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    try:
        async with container() as request_container:
            badge_service = await request_container.get(BadgeService)
            await badge_service.seed_badges()
    except Exception as e:
        # The API still serves; badges are seeded on the next start
        logfire.error(
            "Badge initialization failed",
            error=str(e),
            error_type=type(e).__name__,
        )
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Assemble the API.

    Logfire is configured by scripts/start_app.py before this runs.

    Args:
        container: DI container (the production one when omitted)
    """
    settings = Settings()

    application = FastAPI(
        title="Eco Habits API",
        description="Log eco-friendly actions, build streaks and unlock badges",
        version=__version__,
        lifespan=lifespan,
    )
    instrument_fastapi(application)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(application, container or create_container())
    register_exception_handlers(application)

    for router in ROUTERS:
        application.include_router(router)

    return application


# Target for uvicorn
app = create_app()
