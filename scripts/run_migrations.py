#!/usr/bin/env python3
"""Upgrade the diary database to the latest Alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from diary.config import Settings
from diary.util.observability import configure_logfire


def main() -> int:
    """Run ``alembic upgrade head``; a failure exits non-zero."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", environment=settings.environment):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start against a stale schema
            raise

    logfire.info("Database is at head")
    return 0


if __name__ == "__main__":
    sys.exit(main())
