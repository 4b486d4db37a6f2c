"""Logfire setup and instrumentation.

Domain services log and trace through logfire directly:

    with logfire.span("user_identity_service.register", email=email):
        ...
        logfire.info("User registered", user_id=str(user.id))

Cloud export is off unless a token is configured or
OBSERVABILITY__SEND_TO_LOGFIRE is set explicitly.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from userapi.config import VERSION, ObservabilitySettings, Settings

SERVICE_NAME = "user-api"

UNTRACED_URLS = "/health"


def should_send(observability: ObservabilitySettings) -> bool:
    """Decide whether spans leave the process."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the process-wide logfire instance.

    Call once at startup, before the app is created.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=VERSION,
        environment=settings.environment,
        send_to_logfire=send,
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
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Request headers are not captured, so bearer tokens never reach a span.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
