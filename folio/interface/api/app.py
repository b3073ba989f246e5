"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from folio.config import Settings
from folio.interface.api.cors import add_cors
from folio.interface.api.routes import (
    admin,
    bookmarks,
    engagement,
    facets,
    health,
    notifications,
    posts,
    reading_lists,
)
from folio.util.di.container import create_container, setup_di
from folio.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; a production container is built if omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Folio API",
        description="Backend API for Folio - a blog for publishing, discovering and discussing posts",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    add_cors(app_instance, settings)

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(engagement.router)
    app_instance.include_router(bookmarks.router)
    app_instance.include_router(reading_lists.router)
    app_instance.include_router(facets.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(admin.router)

    return app_instance
