"""Logfire setup and instrumentation helpers.

Domain services and the Steam adapters emit spans and events directly:

    with logfire.span("activity_service.refresh", steam_id=str(steam_id)):
        logfire.info("Activity refreshed", inserted=inserted)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from playtrack.config import Settings

# Steam Web API keys and OpenID signatures travel as query parameters
SCRUBBED_FIELDS = ["key", "openid.sig", "openid.assoc_handle", "session_id", "auth_token"]

_httpx_instrumented = False


def _should_send(settings: Settings) -> bool:
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire export for the process.

    Traces go to the console always, and to Logfire cloud when
    OBSERVABILITY__LOGFIRE_TOKEN is set (OBSERVABILITY__SEND_TO_LOGFIRE
    overrides that).

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="playtrack-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes."""
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements run on an engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound Steam calls.

    httpx instrumentation is global, so repeated calls are no-ops.
    """
    global _httpx_instrumented
    if _httpx_instrumented:
        return
    logfire.instrument_httpx()
    _httpx_instrumented = True
