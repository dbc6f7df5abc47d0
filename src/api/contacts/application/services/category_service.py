"""Category service for the contacts bounded context."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from contacts.application.observability import (
    CategoryServiceProbe,
    DefaultCategoryServiceProbe,
)
from contacts.domain.aggregates import Category, Contact
from contacts.domain.value_objects import CategoryId, EntityKind
from contacts.ports.repositories import (
    ICategoryContactLinkRepository,
    ICategoryRepository,
    IContactRepository,
)
from shared_kernel.exceptions import NotFoundError
from shared_kernel.middleware.tenant_context import TenantContext, tenant_context
from shared_kernel.pagination import PageRequest, PagedResult


class CategoryService:
    """Application service for categories of the current tenant.

    A category owned by another tenant is reported as not found, exactly
    like a category that does not exist.
    """

    def __init__(
        self,
        category_repository: ICategoryRepository,
        contact_repository: IContactRepository,
        link_repository: ICategoryContactLinkRepository,
        session: AsyncSession,
        context: TenantContext | None = None,
        probe: CategoryServiceProbe | None = None,
    ):
        """Initialize CategoryService with dependencies.

        Args:
            category_repository: Repository for category persistence
            contact_repository: Repository used to list a category's contacts
            link_repository: Edge storage for category/contact links
            session: Database session for transaction management
            context: Tenant context to read (defaults to the request context)
            probe: Optional domain probe for observability
        """
        self._category_repository = category_repository
        self._contact_repository = contact_repository
        self._link_repository = link_repository
        self._session = session
        self._context = context or tenant_context
        self._probe = probe or DefaultCategoryServiceProbe()

    async def list_categories(
        self,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Category]:
        """List the current tenant's categories.

        Raises:
            ValidationError: If the sort field is not supported
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            return await self._category_repository.search(
                tenant_id, name_filter, page_request
            )

    async def create_category(self, category_name: str) -> Category:
        """Create a category in the current tenant.

        Raises:
            ValidationError: If the name is blank
        """
        category = Category.create(
            tenant_id=self._context.require(),
            category_name=category_name,
        )
        async with self._session.begin():
            await self._category_repository.save(category)

        self._probe.category_created(category.id.value, category.category_name)
        return category

    async def get_category(self, category_id: CategoryId) -> Category:
        """Retrieve a category of the current tenant.

        Raises:
            NotFoundError: If absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            return await self._load(tenant_id, category_id)

    async def update_category(
        self,
        category_id: CategoryId,
        category_name: str | None = None,
    ) -> Category:
        """Update a category of the current tenant.

        Fields passed as None keep their current value.

        Raises:
            NotFoundError: If absent or owned by another tenant
            ValidationError: If the name is blank
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            category = await self._load(tenant_id, category_id)
            if category_name is not None:
                category.rename(category_name)
                await self._category_repository.save(category)

        self._probe.category_updated(category_id.value)
        return category

    async def delete_category(self, category_id: CategoryId) -> None:
        """Delete a category and every link touching it.

        Raises:
            NotFoundError: If absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            category = await self._load(tenant_id, category_id)
            unlinked = await self._link_repository.unlink_all_for(
                category_id.value, EntityKind.CATEGORY
            )
            await self._category_repository.delete(category)

        self._probe.category_deleted(category_id.value, unlinked=unlinked)

    async def list_contacts_of(
        self,
        category_id: CategoryId,
        contact_name_filter: str | None,
        phone_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Contact]:
        """List the contacts in a category of the current tenant.

        Raises:
            NotFoundError: If the category is absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            await self._load(tenant_id, category_id)
            return await self._contact_repository.search_in_category(
                tenant_id,
                category_id,
                contact_name_filter,
                phone_filter,
                page_request,
            )

    async def _load(self, tenant_id: str, category_id: CategoryId) -> Category:
        category = await self._category_repository.get(tenant_id, category_id)
        if category is None:
            self._probe.category_not_found(category_id.value)
            raise NotFoundError("Category", category_id.value)
        return category
