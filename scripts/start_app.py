#!/usr/bin/env python3
"""Serve the comment API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from remark.config import Settings
from remark.util.logging import setup_logging
from remark.util.observability import configure_logfire

APP_FACTORY = "remark.interface.api.app:create_app"


def main() -> int:
    """Configure observability, then hand the process to uvicorn."""
    settings = Settings()

    # Before anything else so startup errors are captured
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting comment API",
        host=settings.host,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Comment API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container exits non-zero
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
