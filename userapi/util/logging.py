"""Standard library logging setup.

Route handlers and third-party libraries log through ``logging``. Records
are written to stdout and forwarded to logfire, so they show up next to
the spans of the request that produced them.
"""

import logging
import sys

import logfire

from userapi.config import Settings

QUIET_LOGGERS = ("sqlalchemy.engine", "asyncio", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Root level for the given settings."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Install stdout and logfire handlers on the root logger.

    Replaces any handlers configured earlier, e.g. by uvicorn.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [stream, logfire.LogfireLoggingHandler()]
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
