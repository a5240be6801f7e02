"""Stdlib logging for third-party libraries.

Application code logs through Logfire (see eco.util.observability); this
only makes uvicorn, asyncpg and SQLAlchemy output readable next to it.
"""

import logging
import sys

from eco.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Library loggers that are chatty at INFO
QUIET_LOGGERS = ("asyncpg", "websockets", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once per process.

    Args:
        settings: Application settings (``debug`` selects DEBUG over INFO)
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # Statement echo only when debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
