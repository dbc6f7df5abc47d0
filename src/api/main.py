"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from contacts.dependencies import create_tenant_data_purger
from contacts.presentation import router as contacts_router
from iam.application.services import TenantBootstrapService
from iam.dependencies.tenant import register_tenant_data_purger
from iam.infrastructure.principal_resolver import BasicAuthPrincipalResolver
from iam.infrastructure.tenant_repository import TenantRepository
from iam.presentation import router as iam_router
from infrastructure.database import (
    close_database_connections,
    create_schema,
    get_sessionmaker,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from infrastructure.web import register_exception_handlers
from shared_kernel.middleware.asgi import AccessGateMiddleware


async def bootstrap_admin_tenant() -> None:
    """Create the configured admin tenant if it does not exist yet."""
    iam_settings = get_settings().iam
    probe = DefaultStartupProbe()

    if not iam_settings.bootstrap_enabled:
        probe.admin_bootstrap_disabled()
        return

    assert iam_settings.bootstrap_admin_username is not None
    assert iam_settings.bootstrap_admin_password is not None

    async with get_sessionmaker()() as session:
        service = TenantBootstrapService(
            tenant_repository=TenantRepository(session),
            session=session,
            probe=probe,
        )
        await service.ensure_admin_tenant(
            username=iam_settings.bootstrap_admin_username,
            password=iam_settings.bootstrap_admin_password.get_secret_value(),
            name=iam_settings.bootstrap_admin_name,
        )


@asynccontextmanager
async def contacts_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Wiring the contacts purger into tenant deletion
    - Schema creation (development only) and admin bootstrap
    - Engine disposal on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    register_tenant_data_purger(create_tenant_data_purger)

    if settings.database.create_schema:
        await create_schema()
    await bootstrap_admin_tenant()

    try:
        yield
    finally:
        await close_database_connections()


app = FastAPI(
    title="Contacts API",
    description="Multi-tenant contact and category management",
    version=__version__,
    lifespan=contacts_lifespan,
)

app.add_middleware(
    AccessGateMiddleware,
    resolver=BasicAuthPrincipalResolver(get_sessionmaker),
    www_authenticate='Basic realm="contacts"',
)

register_exception_handlers(app)

app.include_router(contacts_router)
app.include_router(iam_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
