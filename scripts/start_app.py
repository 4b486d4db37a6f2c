#!/usr/bin/env python3
"""Run the User API under uvicorn.

Logfire and logging are configured before the app factory runs, so a
failure while building the app (bad settings, missing secret) is reported.
"""

import sys

import logfire
import uvicorn

from userapi.config import Settings
from userapi.util.logging import setup_logging
from userapi.util.observability import configure_logfire

APP_FACTORY = "userapi.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting User API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            log_config=None,
        )
    except Exception:
        logfire.exception("User API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
