"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from remark.interface.api.routes import comments, health, reactions
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one
            (tests pass a container with in-memory persistence)
    """
    app_instance = FastAPI(
        title="Remark API",
        description="Threaded comments on arbitrary resources, stored as materialized paths",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(reactions.router)

    return app_instance
