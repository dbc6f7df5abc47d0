"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. The tenant repository deliberately operates across all tenants:
it serves the admin namespace, which is never tenant-scoped.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import TenantId
from shared_kernel.pagination import PageRequest, PagedResult


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for Tenant aggregate persistence."""

    async def save(self, tenant: Tenant) -> None:
        """Persist a tenant aggregate.

        Creates a new tenant or updates an existing one.

        Args:
            tenant: The Tenant aggregate to persist

        Raises:
            DuplicateUsernameError: If another tenant holds the username
        """
        ...

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Retrieve a tenant by its ID.

        Returns:
            The Tenant aggregate, or None if not found
        """
        ...

    async def get_by_username(self, username: str) -> Tenant | None:
        """Retrieve a tenant by its (globally unique) username.

        Returns:
            The Tenant aggregate, or None if not found
        """
        ...

    async def search(
        self,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Tenant]:
        """List tenants, optionally filtered by a case-insensitive name substring.

        Raises:
            ValidationError: If the sort field is not supported
        """
        ...

    async def delete(self, tenant: Tenant) -> bool:
        """Delete a tenant.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class ITenantDataPurger(Protocol):
    """Removes every record a tenant owns outside the IAM context.

    Invoked inside the tenant-deletion transaction so a deleted tenant never
    leaves categories, contacts, or links behind.
    """

    async def purge_tenant(self, tenant_id: str) -> int:
        """Delete all data owned by ``tenant_id``.

        Returns:
            Number of rows removed
        """
        ...
