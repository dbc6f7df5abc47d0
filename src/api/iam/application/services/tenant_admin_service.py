"""Tenant administration service for IAM bounded context.

Handles the tenant lifecycle (create, read, list, update, delete). Callers
reach it only through the admin namespace, which the AccessGate restricts
to ADMIN principals; the service itself is deliberately not tenant-scoped.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability.tenant_admin_service_probe import (
    DefaultTenantAdminServiceProbe,
    TenantAdminServiceProbe,
)
from iam.application.security import hash_password
from iam.domain.aggregates import Tenant
from iam.domain.value_objects import Role, TenantId
from iam.ports.exceptions import DuplicateUsernameError
from iam.ports.repositories import ITenantDataPurger, ITenantRepository
from shared_kernel.exceptions import NotFoundError, ValidationError
from shared_kernel.pagination import PageRequest, PagedResult


def _require_password(password: str | None) -> str:
    if password is None or not password.strip():
        raise ValidationError("password must not be blank")
    return password


class TenantAdminService:
    """Application service for tenant administration.

    Deleting a tenant cascades: the tenant's categories, contacts, and
    their links are purged in the same transaction as the tenant row.
    """

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        data_purger: ITenantDataPurger,
        session: AsyncSession,
        probe: TenantAdminServiceProbe | None = None,
    ):
        """Initialize TenantAdminService with dependencies.

        Args:
            tenant_repository: Repository for tenant persistence
            data_purger: Removes tenant-owned data on tenant deletion
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._tenant_repository = tenant_repository
        self._data_purger = data_purger
        self._session = session
        self._probe = probe or DefaultTenantAdminServiceProbe()

    async def list_tenants(
        self,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Tenant]:
        """List tenants across the whole system."""
        async with self._session.begin():
            return await self._tenant_repository.search(name_filter, page_request)

    async def get_tenant(self, tenant_id: TenantId) -> Tenant:
        """Retrieve a tenant by ID.

        Raises:
            NotFoundError: If the tenant does not exist
        """
        async with self._session.begin():
            return await self._load(tenant_id)

    async def create_tenant(
        self,
        name: str,
        username: str,
        password: str,
        role: Role = Role.USER,
        description: str | None = None,
    ) -> Tenant:
        """Create a tenant with a hashed credential.

        Raises:
            ValidationError: If name, username, or password is blank
            DuplicateUsernameError: If the username is already taken
        """
        _require_password(password)
        tenant = Tenant.create(
            name=name,
            username=username,
            password_hash=hash_password(password),
            role=role,
            description=description,
        )

        async with self._session.begin():
            try:
                await self._tenant_repository.save(tenant)
            except DuplicateUsernameError:
                self._probe.duplicate_username(tenant.username)
                raise

        self._probe.tenant_created(
            tenant_id=tenant.id.value,
            username=tenant.username,
            role=tenant.role.value,
        )
        return tenant

    async def update_tenant(
        self,
        tenant_id: TenantId,
        name: str | None = None,
        description: str | None = None,
        username: str | None = None,
        password: str | None = None,
        role: Role | None = None,
    ) -> Tenant:
        """Apply a partial update to a tenant.

        Fields left as None are unchanged. A new password is re-hashed.

        Raises:
            NotFoundError: If the tenant does not exist
            ValidationError: If a given field is blank
            DuplicateUsernameError: If the new username belongs to another tenant
        """
        password_hash = None
        if password is not None:
            password_hash = hash_password(_require_password(password))

        async with self._session.begin():
            tenant = await self._load(tenant_id)
            tenant.update(
                name=name,
                description=description,
                username=username,
                password_hash=password_hash,
                role=role,
            )
            try:
                await self._tenant_repository.save(tenant)
            except DuplicateUsernameError:
                self._probe.duplicate_username(tenant.username)
                raise

        self._probe.tenant_updated(tenant_id.value)
        return tenant

    async def delete_tenant(self, tenant_id: TenantId) -> None:
        """Delete a tenant and every record it owns.

        Raises:
            NotFoundError: If the tenant does not exist
        """
        async with self._session.begin():
            tenant = await self._load(tenant_id)
            purged = await self._data_purger.purge_tenant(tenant_id.value)
            await self._tenant_repository.delete(tenant)

        self._probe.tenant_deleted(tenant_id.value, purged_rows=purged)

    async def _load(self, tenant_id: TenantId) -> Tenant:
        tenant = await self._tenant_repository.get_by_id(tenant_id)
        if tenant is None:
            self._probe.tenant_not_found(tenant_id.value)
            raise NotFoundError("Tenant", tenant_id.value)
        return tenant
