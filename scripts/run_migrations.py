#!/usr/bin/env python3
"""Apply the comment store schema with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from remark.config import Settings
from remark.util.logging import setup_logging
from remark.util.observability import configure_logfire

REPO_ROOT = Path(__file__).resolve().parent.parent


def main(argv: list[str]) -> int:
    """Upgrade the comments schema and log any failure to Logfire."""
    settings = Settings()
    revision = argv[0] if argv else "head"

    configure_logfire(settings)
    setup_logging(settings)

    alembic_cfg = Config(str(REPO_ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(REPO_ROOT / "migrations"))

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Comment schema migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container does not start on a stale schema
            raise

    logfire.info("Comment schema at revision", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
