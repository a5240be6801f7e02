"""Logfire setup and instrumentation.

Application code logs and traces through ``logfire`` directly:

    logfire.info("Actions logged", user_id=str(user_id), actions_added=2)

    with logfire.span("action_service.log_actions", user_id=str(user_id)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from eco.config import ObservabilitySettings, Settings

SERVICE_NAME = "eco-backend"

# Probes hit these every few seconds; tracing them is noise
UNTRACED_URLS = "/health"


def should_send(settings: ObservabilitySettings) -> bool:
    """Whether telemetry goes to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise a token turns it on.
    """
    if settings.send_to_logfire is not None:
        return settings.send_to_logfire
    return bool(settings.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Without a token everything stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # WebSocket connections carry no HTTP method
    result = {**attributes, "path": request.url.path}
    method = getattr(request, "method", None)
    result["transport"] = "http" if method else "websocket"
    if method:
        result["method"] = method
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request and WebSocket session except health checks."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
