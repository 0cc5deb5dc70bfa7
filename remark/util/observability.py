"""Logfire wiring for the comment service.

Service code logs and traces through ``logfire`` directly:

    logfire.info("Root comment created", comment_id=str(comment_id))

    with logfire.span("comment_service.delete_comment", comment_id=...):
        ...

This module only configures the SDK once at startup and attaches the
FastAPI and SQLAlchemy integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from remark.config import Settings

SERVICE_NAME = "remark-api"
SERVICE_VERSION = "0.1.0"

# Probed constantly by the orchestrator, not worth a span each
UNTRACED_URLS = "/health"


def _should_send(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else send iff a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Without OBSERVABILITY__LOGFIRE_TOKEN everything stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
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
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every comment and reaction request except health checks."""
    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        excluded_urls=UNTRACED_URLS,
    )
    logfire.info("FastAPI instrumented", app=app.title)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace comment store queries issued through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the active span context
    )
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
