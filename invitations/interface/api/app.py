"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from invitations.adapter.host import InMemoryCoreFacade
from invitations.config import Settings
from invitations.domain.service import CoreFacade
from invitations.interface.api.routes import health, invitations
from invitations.util.di.container import create_container, setup_di
from invitations.util.observability import instrument_fastapi


def create_app(
    core: CoreFacade | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        core: Facade of the hosting platform. Defaults to a standalone
            in-memory host.
        container: Prebuilt DI container, used by tests

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Project Invitations API",
        description="Shareable links that add people to a project with a role or group",
        version="0.1.0",
        debug=settings.debug,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    if container is None:
        container = create_container(core or InMemoryCoreFacade())
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(invitations.router)

    return app_instance
