#!/usr/bin/env python3
"""Start the diary API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from diary.config import Settings
from diary.util.logging import setup_logging
from diary.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then serve the app until shutdown."""
    settings = Settings()

    # Before the app import so startup errors are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting diary API",
            environment=settings.environment,
            port=settings.port,
        )
        uvicorn.run(
            "diary.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Diary API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
