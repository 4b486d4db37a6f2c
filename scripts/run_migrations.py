#!/usr/bin/env python3
"""Upgrade the database schema to the latest Alembic revision.

Run before the app starts; a failure stops the deploy.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from userapi.config import Settings
from userapi.util.observability import configure_logfire


def main(config_path: str = "alembic.ini") -> int:
    configure_logfire(Settings())

    with logfire.span("Database migrations", config=config_path):
        try:
            command.upgrade(Config(config_path), "head")
        except Exception:
            logfire.exception("Database migration failed")
            raise

    logfire.info("Database is at head revision")
    return 0


if __name__ == "__main__":
    sys.exit(main())
