"""SQLAlchemy implementation of ITenantRepository.

This repository manages tenant storage. It is not tenant-scoped: it backs
the admin namespace and principal resolution, both of which work across
all tenants.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import Role, TenantId
from iam.infrastructure.models import TenantModel
from iam.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from iam.ports.exceptions import DuplicateUsernameError
from iam.ports.repositories import ITenantRepository
from infrastructure.database.queries import contains_ignore_case, fetch_page
from shared_kernel.exceptions import ConflictError
from shared_kernel.pagination import PageRequest, PagedResult

SORT_COLUMNS = {
    "name": TenantModel.name,
    "username": TenantModel.username,
    "id": TenantModel.id,
    "createdAt": TenantModel.created_at,
    "updatedAt": TenantModel.updated_at,
}


class TenantRepository(ITenantRepository):
    """Repository managing storage for Tenant aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultTenantRepositoryProbe()

    async def save(self, tenant: Tenant) -> None:
        """Insert or update a tenant.

        Args:
            tenant: The Tenant aggregate to persist

        Raises:
            DuplicateUsernameError: If another tenant holds the username
            ConflictError: If the database rejects the write on another
                uniqueness constraint
        """
        existing = await self.get_by_username(tenant.username)
        if existing and existing.id.value != tenant.id.value:
            self._probe.duplicate_username(tenant.username)
            raise DuplicateUsernameError(tenant.username)

        try:
            model = await self._session.get(TenantModel, tenant.id.value)

            if model:
                model.name = tenant.name
                model.description = tenant.description
                model.username = tenant.username
                model.password_hash = tenant.password_hash
                model.role = tenant.role.value
                if tenant.updated_at is not None:
                    model.updated_at = tenant.updated_at
            else:
                model = TenantModel(
                    id=tenant.id.value,
                    name=tenant.name,
                    description=tenant.description,
                    username=tenant.username,
                    password_hash=tenant.password_hash,
                    role=tenant.role.value,
                )
                if tenant.created_at is not None:
                    model.created_at = tenant.created_at
                    model.updated_at = tenant.updated_at or tenant.created_at
                self._session.add(model)

            # Flush to surface integrity errors inside this call
            await self._session.flush()
            self._probe.tenant_saved(tenant.id.value)

        except IntegrityError as e:
            # A concurrent insert can slip past the pre-check above
            if "username" in str(e.orig):
                self._probe.duplicate_username(tenant.username)
                raise DuplicateUsernameError(tenant.username) from e
            raise ConflictError(f"Tenant {tenant.id.value} conflicts") from e

    async def get_by_id(self, tenant_id: TenantId) -> Tenant | None:
        """Fetch a tenant by id.

        Returns:
            The Tenant aggregate, or None if not found
        """
        model = await self._session.get(TenantModel, tenant_id.value)
        if model is None:
            return None

        self._probe.tenant_retrieved(model.id)
        return self._to_domain(model)

    async def get_by_username(self, username: str) -> Tenant | None:
        """Fetch a tenant by username.

        Returns:
            The Tenant aggregate, or None if not found
        """
        stmt = select(TenantModel).where(TenantModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        self._probe.tenant_retrieved(model.id)
        return self._to_domain(model)

    async def search(
        self,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Tenant]:
        """List one page of tenants across the whole system.

        Args:
            name_filter: Case-insensitive substring of the tenant name
            page_request: Page, size and ordering (default: name)

        Returns:
            PagedResult of Tenant aggregates with the total match count
        """
        stmt = select(TenantModel)
        if name_filter:
            stmt = stmt.where(contains_ignore_case(TenantModel.name, name_filter))

        models, total = await fetch_page(
            self._session,
            stmt,
            page_request,
            sort_columns=SORT_COLUMNS,
            default_sort="name",
            tiebreaker=TenantModel.id,
        )

        self._probe.tenants_listed(count=len(models), total=total)
        return PagedResult.of([self._to_domain(m) for m in models], total, page_request)

    async def delete(self, tenant: Tenant) -> bool:
        """Delete a tenant row.

        Returns:
            True if deleted, False if not found
        """
        model = await self._session.get(TenantModel, tenant.id.value)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.tenant_deleted(tenant.id.value)
        return True

    @staticmethod
    def _to_domain(model: TenantModel) -> Tenant:
        return Tenant(
            id=TenantId(value=model.id),
            name=model.name,
            description=model.description,
            username=model.username,
            password_hash=model.password_hash,
            role=Role.parse(model.role),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
