"""SQLAlchemy implementation of ICategoryRepository.

Every query filters on the tenant id it is given, so a category owned by
another tenant is indistinguishable from one that does not exist.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contacts.domain.aggregates import Category
from contacts.domain.value_objects import CategoryId, ContactId
from contacts.infrastructure.models import CategoryContactLinkModel, CategoryModel
from contacts.infrastructure.observability import (
    CategoryRepositoryProbe,
    DefaultCategoryRepositoryProbe,
)
from contacts.ports.repositories import ICategoryRepository
from infrastructure.database.queries import contains_ignore_case, fetch_page
from shared_kernel.pagination import PageRequest, PagedResult

SORT_COLUMNS = {
    "categoryName": CategoryModel.category_name,
    "id": CategoryModel.id,
    "createdAt": CategoryModel.created_at,
    "updatedAt": CategoryModel.updated_at,
}
DEFAULT_SORT = "categoryName"


class CategoryRepository(ICategoryRepository):
    """Repository managing storage for Category aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: CategoryRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultCategoryRepositoryProbe()

    async def save(self, category: Category) -> None:
        """Insert or update a category."""
        model = await self._session.get(CategoryModel, category.id.value)

        if model:
            model.category_name = category.category_name
            if category.updated_at is not None:
                model.updated_at = category.updated_at
        else:
            model = CategoryModel(
                id=category.id.value,
                tenant_id=category.tenant_id,
                category_name=category.category_name,
            )
            if category.created_at is not None:
                model.created_at = category.created_at
                model.updated_at = category.updated_at or category.created_at
            self._session.add(model)

        await self._session.flush()
        self._probe.category_saved(category.id.value, category.tenant_id)

    async def get(self, tenant_id: str, category_id: CategoryId) -> Category | None:
        """Fetch a category owned by ``tenant_id``.

        Returns:
            The Category, or None if absent or owned by another tenant
        """
        stmt = select(CategoryModel).where(
            CategoryModel.id == category_id.value,
            CategoryModel.tenant_id == tenant_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def search(
        self,
        tenant_id: str,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Category]:
        """List one page of the tenant's categories."""
        stmt = select(CategoryModel).where(CategoryModel.tenant_id == tenant_id)
        if name_filter:
            stmt = stmt.where(
                contains_ignore_case(CategoryModel.category_name, name_filter)
            )
        return await self._page(tenant_id, stmt, page_request)

    async def search_for_contact(
        self,
        tenant_id: str,
        contact_id: ContactId,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Category]:
        """List one page of the tenant's categories linked to a contact."""
        stmt = (
            select(CategoryModel)
            .join(
                CategoryContactLinkModel,
                CategoryContactLinkModel.category_id == CategoryModel.id,
            )
            .where(
                CategoryContactLinkModel.contact_id == contact_id.value,
                CategoryModel.tenant_id == tenant_id,
            )
        )
        if name_filter:
            stmt = stmt.where(
                contains_ignore_case(CategoryModel.category_name, name_filter)
            )
        return await self._page(tenant_id, stmt, page_request)

    async def delete(self, category: Category) -> bool:
        """Delete a category row.

        Links must already be removed by the caller.

        Returns:
            True if deleted, False if not found
        """
        model = await self._session.get(CategoryModel, category.id.value)
        if model is None or model.tenant_id != category.tenant_id:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.category_deleted(category.id.value, category.tenant_id)
        return True

    async def _page(self, tenant_id, stmt, page_request: PageRequest):
        models, total = await fetch_page(
            self._session,
            stmt,
            page_request,
            sort_columns=SORT_COLUMNS,
            default_sort=DEFAULT_SORT,
            tiebreaker=CategoryModel.id,
        )
        self._probe.categories_listed(tenant_id, count=len(models), total=total)
        return PagedResult.of([self._to_domain(m) for m in models], total, page_request)

    @staticmethod
    def _to_domain(model: CategoryModel) -> Category:
        return Category(
            id=CategoryId(value=model.id),
            tenant_id=model.tenant_id,
            category_name=model.category_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
