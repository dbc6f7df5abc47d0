"""Tenant bootstrap service for IAM bounded context.

Ensures an ADMIN tenant exists at application startup so the admin
namespace is reachable on a fresh database.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.security import hash_password
from iam.domain.aggregates import Tenant
from iam.domain.value_objects import Role
from iam.ports.repositories import ITenantRepository
from infrastructure.observability.startup_probe import (
    DefaultStartupProbe,
    StartupProbe,
)


class TenantBootstrapService:
    """Bootstrap service for admin tenant provisioning.

    Unlike TenantAdminService, this service needs no data purger and is
    intended to run once during application startup.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        session: AsyncSession,
        probe: StartupProbe | None = None,
    ):
        """Initialize TenantBootstrapService with dependencies.

        Args:
            tenant_repository: Repository for tenant persistence
            session: Database session for transaction management
            probe: Optional startup probe for observability
        """
        self._tenant_repository = tenant_repository
        self._session = session
        self._probe = probe or DefaultStartupProbe()

    async def ensure_admin_tenant(
        self,
        username: str,
        password: str,
        name: str = "Administrator",
    ) -> Tenant:
        """Create the admin tenant unless its username is already taken.

        Idempotent: an existing tenant with the username is returned as-is,
        whatever its role or password.

        Args:
            username: Login name of the admin tenant
            password: Plaintext password, hashed before storage
            name: Display name

        Returns:
            The existing or newly created tenant
        """
        async with self._session.begin():
            existing = await self._tenant_repository.get_by_username(username)
            if existing is not None:
                self._probe.admin_tenant_already_exists(
                    tenant_id=existing.id.value,
                    username=username,
                )
                return existing

            tenant = Tenant.create(
                name=name,
                username=username,
                password_hash=hash_password(password),
                role=Role.ADMIN,
                description="Bootstrap administrator",
            )
            await self._tenant_repository.save(tenant)

        self._probe.admin_tenant_bootstrapped(
            tenant_id=tenant.id.value,
            username=username,
        )
        return tenant
