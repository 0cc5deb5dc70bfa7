"""Stdlib logging setup.

Uvicorn, SQLAlchemy and alembic log through the standard library. Their
records are forwarded to Logfire so they sit next to the service's own
spans. Call after ``configure_logfire``.
"""

import logging

import logfire

from remark.config import Settings

# Chatty below WARNING
QUIET_LOGGERS = ("asyncpg", "httpx", "sqlalchemy.pool")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into Logfire at a level based on ``settings.debug``.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by earlier imports
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("remark").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
