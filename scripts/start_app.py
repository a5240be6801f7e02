#!/usr/bin/env python3
"""Run the API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from eco.config import Settings
from eco.util.logging import setup_logging
from eco.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app import so import-time errors are captured
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Starting eco API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "eco.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
