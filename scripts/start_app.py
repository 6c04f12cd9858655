#!/usr/bin/env python3
"""Start the Playtrack API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from playtrack.config import Settings
from playtrack.util.logging import setup_logging
from playtrack.util.observability import configure_logfire


def main() -> int:
    """Configure logging, then serve the app built by ``create_app``."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Playtrack API",
            environment=settings.environment,
            base_url=settings.api.base_url,
        )
        uvicorn.run(
            "playtrack.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Playtrack API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
