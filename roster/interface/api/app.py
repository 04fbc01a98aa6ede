"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.config import Settings
from roster.interface.api.errors import register_error_handlers
from roster.interface.api.routes import health, invitations, organizations, users
from roster.interface.worker.scheduler import create_sweep_scheduler
from roster.util.di.container import create_container, setup_di
from roster.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one built with mocks.
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests (mail relay)
    instrument_httpx()

    container = container or create_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        scheduler = None
        if settings.invitations.sweep_enabled:
            scheduler = create_sweep_scheduler(container, settings)
            scheduler.start()
            logfire.info(
                "Invitation expiry sweep scheduled",
                interval_minutes=settings.invitations.sweep_interval_minutes,
            )
        yield
        if scheduler is not None:
            scheduler.shutdown(wait=False)
        await container.close()

    app_instance = FastAPI(
        title="Roster API",
        description="Organization membership: roles, invitations and access control",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Actor-Id",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container)
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(organizations.router)
    app_instance.include_router(users.router)
    app_instance.include_router(invitations.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
