"""Stdlib logging setup for routes and scripts."""

import logging
import sys

from playtrack.config import Settings

# Chatty libraries kept at WARNING unless debugging
_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout at INFO, or DEBUG when ``settings.debug``."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )

    quiet_level = level if settings.debug else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).info(
        f"Logging ready ({settings.environment}, {logging.getLevelName(level)})"
    )
