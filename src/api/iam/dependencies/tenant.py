"""Tenant administration dependencies.

The tenant data purger belongs to the contacts bounded context. IAM only
owns the port, so the concrete purger is registered at application
startup instead of being imported here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    DefaultTenantAdminServiceProbe,
    TenantAdminServiceProbe,
)
from iam.application.services import TenantAdminService
from iam.infrastructure.tenant_repository import TenantRepository
from iam.ports.repositories import ITenantDataPurger
from infrastructure.database.dependencies import get_session

TenantDataPurgerFactory = Callable[[AsyncSession], ITenantDataPurger]

# Module-level purger factory (registered at startup)
_data_purger_factory: TenantDataPurgerFactory | None = None


def register_tenant_data_purger(factory: TenantDataPurgerFactory) -> None:
    """Register the factory building the purger for a session.

    Args:
        factory: Callable receiving the request session
    """
    global _data_purger_factory
    _data_purger_factory = factory


def get_tenant_admin_service_probe() -> TenantAdminServiceProbe:
    """Get TenantAdminServiceProbe instance."""
    return DefaultTenantAdminServiceProbe()


def get_tenant_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TenantRepository:
    """Get TenantRepository instance.

    Args:
        session: Async database session

    Returns:
        TenantRepository bound to the request session
    """
    return TenantRepository(session=session)


def get_tenant_data_purger(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ITenantDataPurger:
    """Get the registered tenant data purger.

    Raises:
        RuntimeError: If no purger was registered at startup
    """
    if _data_purger_factory is None:
        raise RuntimeError(
            "Tenant data purger not registered. Ensure app startup completed successfully."
        )
    return _data_purger_factory(session)


def get_tenant_admin_service(
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repository)],
    data_purger: Annotated[ITenantDataPurger, Depends(get_tenant_data_purger)],
    session: Annotated[AsyncSession, Depends(get_session)],
    probe: Annotated[
        TenantAdminServiceProbe, Depends(get_tenant_admin_service_probe)
    ],
) -> TenantAdminService:
    """Get TenantAdminService instance.

    Args:
        tenant_repo: Tenant repository (shares session via FastAPI dependency caching)
        data_purger: Purger for the deleted tenant's contacts data
        session: Database session for transaction management
        probe: Service probe for observability

    Returns:
        TenantAdminService instance
    """
    return TenantAdminService(
        tenant_repository=tenant_repo,
        data_purger=data_purger,
        session=session,
        probe=probe,
    )
