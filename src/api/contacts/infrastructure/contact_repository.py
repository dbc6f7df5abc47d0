"""SQLAlchemy implementation of IContactRepository.

Every query filters on the tenant id it is given. Contacts come back with
their linked category ids, loaded in one extra query per call.
"""

from __future__ import annotations

from collections import defaultdict

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contacts.domain.aggregates import Contact
from contacts.domain.value_objects import CategoryId, ContactId
from contacts.infrastructure.models import (
    CategoryContactLinkModel,
    CategoryModel,
    ContactModel,
)
from contacts.infrastructure.observability import (
    ContactRepositoryProbe,
    DefaultContactRepositoryProbe,
)
from contacts.ports.repositories import IContactRepository
from infrastructure.database.queries import contains_ignore_case, fetch_page
from shared_kernel.pagination import PageRequest, PagedResult

SORT_COLUMNS = {
    "contactName": ContactModel.contact_name,
    "phone": ContactModel.phone,
    "id": ContactModel.id,
    "createdAt": ContactModel.created_at,
    "updatedAt": ContactModel.updated_at,
}
DEFAULT_SORT = "contactName"


class ContactRepository(IContactRepository):
    """Repository managing storage for Contact aggregates."""

    def __init__(
        self,
        session: AsyncSession,
        probe: ContactRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultContactRepositoryProbe()

    async def save(self, contact: Contact) -> None:
        """Insert or update a contact. Links are not touched."""
        model = await self._session.get(ContactModel, contact.id.value)

        if model:
            model.contact_name = contact.contact_name
            model.phone = contact.phone
            if contact.updated_at is not None:
                model.updated_at = contact.updated_at
        else:
            model = ContactModel(
                id=contact.id.value,
                tenant_id=contact.tenant_id,
                contact_name=contact.contact_name,
                phone=contact.phone,
            )
            if contact.created_at is not None:
                model.created_at = contact.created_at
                model.updated_at = contact.updated_at or contact.created_at
            self._session.add(model)

        await self._session.flush()
        self._probe.contact_saved(contact.id.value, contact.tenant_id)

    async def get(self, tenant_id: str, contact_id: ContactId) -> Contact | None:
        """Fetch a contact owned by ``tenant_id`` with its category ids.

        Returns:
            The Contact, or None if absent or owned by another tenant
        """
        stmt = select(ContactModel).where(
            ContactModel.id == contact_id.value,
            ContactModel.tenant_id == tenant_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None

        links = await self._category_ids_for([model.id])
        return self._to_domain(model, links[model.id])

    async def search(
        self,
        tenant_id: str,
        name_filter: str | None,
        phone_filter: str | None,
        category_name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Contact]:
        """List one page of the tenant's contacts."""
        stmt = self._filtered(
            select(ContactModel).where(ContactModel.tenant_id == tenant_id),
            name_filter,
            phone_filter,
        )
        if category_name_filter:
            # IN keeps each contact once however many categories match
            matching = (
                select(CategoryContactLinkModel.contact_id)
                .join(
                    CategoryModel,
                    CategoryModel.id == CategoryContactLinkModel.category_id,
                )
                .where(
                    CategoryModel.tenant_id == tenant_id,
                    contains_ignore_case(
                        CategoryModel.category_name, category_name_filter
                    ),
                )
            )
            stmt = stmt.where(ContactModel.id.in_(matching))
        return await self._page(tenant_id, stmt, page_request)

    async def search_in_category(
        self,
        tenant_id: str,
        category_id: CategoryId,
        name_filter: str | None,
        phone_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Contact]:
        """List one page of the tenant's contacts linked to a category."""
        stmt = (
            select(ContactModel)
            .join(
                CategoryContactLinkModel,
                CategoryContactLinkModel.contact_id == ContactModel.id,
            )
            .where(
                CategoryContactLinkModel.category_id == category_id.value,
                ContactModel.tenant_id == tenant_id,
            )
        )
        stmt = self._filtered(stmt, name_filter, phone_filter)
        return await self._page(tenant_id, stmt, page_request)

    async def delete(self, contact: Contact) -> bool:
        """Delete a contact row.

        Links must already be removed by the caller.

        Returns:
            True if deleted, False if not found
        """
        model = await self._session.get(ContactModel, contact.id.value)
        if model is None or model.tenant_id != contact.tenant_id:
            return False

        await self._session.delete(model)
        await self._session.flush()

        self._probe.contact_deleted(contact.id.value, contact.tenant_id)
        return True

    @staticmethod
    def _filtered(stmt, name_filter: str | None, phone_filter: str | None):
        if name_filter:
            stmt = stmt.where(contains_ignore_case(ContactModel.contact_name, name_filter))
        if phone_filter:
            stmt = stmt.where(contains_ignore_case(ContactModel.phone, phone_filter))
        return stmt

    async def _page(self, tenant_id, stmt, page_request: PageRequest):
        models, total = await fetch_page(
            self._session,
            stmt,
            page_request,
            sort_columns=SORT_COLUMNS,
            default_sort=DEFAULT_SORT,
            tiebreaker=ContactModel.id,
        )
        links = await self._category_ids_for([m.id for m in models])
        self._probe.contacts_listed(tenant_id, count=len(models), total=total)
        return PagedResult.of(
            [self._to_domain(m, links[m.id]) for m in models], total, page_request
        )

    async def _category_ids_for(self, contact_ids: list[str]) -> dict[str, set[str]]:
        links: dict[str, set[str]] = defaultdict(set)
        if not contact_ids:
            return links

        result = await self._session.execute(
            select(
                CategoryContactLinkModel.contact_id,
                CategoryContactLinkModel.category_id,
            ).where(CategoryContactLinkModel.contact_id.in_(contact_ids))
        )
        for contact_id, category_id in result.all():
            links[contact_id].add(category_id)
        return links

    @staticmethod
    def _to_domain(model: ContactModel, category_ids: set[str]) -> Contact:
        return Contact(
            id=ContactId(value=model.id),
            tenant_id=model.tenant_id,
            contact_name=model.contact_name,
            phone=model.phone,
            category_ids=frozenset(category_ids),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
