"""Logging configuration for the application."""

import logging
import sys

from diary.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for libraries that don't go through logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Quiet driver and server chatter unless debugging
    noisy_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in ("asyncpg", "sqlalchemy.engine", "uvicorn.access"):
        logging.getLogger(name).setLevel(noisy_level)

    logging.getLogger("diary").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
