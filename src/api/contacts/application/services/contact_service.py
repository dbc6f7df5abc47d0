"""Contact service for the contacts bounded context."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from contacts.application.observability import (
    ContactServiceProbe,
    DefaultContactServiceProbe,
)
from contacts.domain.aggregates import Category, Contact
from contacts.domain.value_objects import CategoryId, ContactId, EntityKind
from contacts.ports.repositories import (
    ICategoryContactLinkRepository,
    ICategoryRepository,
    IContactRepository,
)
from shared_kernel.exceptions import NotFoundError
from shared_kernel.middleware.tenant_context import TenantContext, tenant_context
from shared_kernel.pagination import PageRequest, PagedResult


class ContactService:
    """Application service for contacts of the current tenant.

    Also owns category membership: a contact and a category can be linked
    only when both belong to the current tenant.
    """

    def __init__(
        self,
        contact_repository: IContactRepository,
        category_repository: ICategoryRepository,
        link_repository: ICategoryContactLinkRepository,
        session: AsyncSession,
        context: TenantContext | None = None,
        probe: ContactServiceProbe | None = None,
    ):
        """Initialize ContactService with dependencies.

        Args:
            contact_repository: Repository for contact persistence
            category_repository: Repository used to resolve categories
            link_repository: Edge storage for category/contact links
            session: Database session for transaction management
            context: Tenant context to read (defaults to the request context)
            probe: Optional domain probe for observability
        """
        self._contact_repository = contact_repository
        self._category_repository = category_repository
        self._link_repository = link_repository
        self._session = session
        self._context = context or tenant_context
        self._probe = probe or DefaultContactServiceProbe()

    async def list_contacts(
        self,
        name_filter: str | None,
        phone_filter: str | None,
        category_name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Contact]:
        """List the current tenant's contacts.

        Raises:
            ValidationError: If the sort field is not supported
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            return await self._contact_repository.search(
                tenant_id,
                name_filter,
                phone_filter,
                category_name_filter,
                page_request,
            )

    async def create_contact(self, contact_name: str, phone: str) -> Contact:
        """Create a contact in the current tenant.

        Raises:
            ValidationError: If the name or phone is blank
        """
        contact = Contact.create(
            tenant_id=self._context.require(),
            contact_name=contact_name,
            phone=phone,
        )
        async with self._session.begin():
            await self._contact_repository.save(contact)

        self._probe.contact_created(contact.id.value)
        return contact

    async def get_contact(self, contact_id: ContactId) -> Contact:
        """Retrieve a contact of the current tenant.

        Raises:
            NotFoundError: If absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            return await self._load(tenant_id, contact_id)

    async def update_contact(
        self,
        contact_id: ContactId,
        contact_name: str,
        phone: str,
    ) -> Contact:
        """Replace name and phone of a contact of the current tenant.

        Raises:
            NotFoundError: If absent or owned by another tenant
            ValidationError: If the name or phone is blank
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            contact = await self._load(tenant_id, contact_id)
            contact.update(contact_name=contact_name, phone=phone)
            await self._contact_repository.save(contact)

        self._probe.contact_updated(contact_id.value)
        return contact

    async def delete_contact(self, contact_id: ContactId) -> None:
        """Delete a contact and every link touching it.

        Raises:
            NotFoundError: If absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            contact = await self._load(tenant_id, contact_id)
            unlinked = await self._link_repository.unlink_all_for(
                contact_id.value, EntityKind.CONTACT
            )
            await self._contact_repository.delete(contact)

        self._probe.contact_deleted(contact_id.value, unlinked=unlinked)

    async def list_categories_of(
        self,
        contact_id: ContactId,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Category]:
        """List the categories a contact of the current tenant belongs to.

        Raises:
            NotFoundError: If the contact is absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            await self._load(tenant_id, contact_id)
            return await self._category_repository.search_for_contact(
                tenant_id, contact_id, name_filter, page_request
            )

    async def assign_category(
        self,
        contact_id: ContactId,
        category_id: CategoryId,
    ) -> Contact:
        """Place a contact in a category. Idempotent.

        Returns:
            The contact with its updated category ids

        Raises:
            NotFoundError: If either side is absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            contact = await self._load(tenant_id, contact_id)
            await self._require_category(tenant_id, category_id)
            await self._link_repository.link(category_id.value, contact_id.value)
            contact.category_ids = frozenset(
                await self._link_repository.linked_ids(
                    contact_id.value, EntityKind.CONTACT
                )
            )

        self._probe.category_assigned(contact_id.value, category_id.value)
        return contact

    async def remove_category(
        self,
        contact_id: ContactId,
        category_id: CategoryId,
    ) -> None:
        """Take a contact out of a category. Removing a missing link is a no-op.

        Raises:
            NotFoundError: If either side is absent or owned by another tenant
        """
        tenant_id = self._context.require()
        async with self._session.begin():
            await self._load(tenant_id, contact_id)
            await self._require_category(tenant_id, category_id)
            await self._link_repository.unlink(category_id.value, contact_id.value)

        self._probe.category_removed(contact_id.value, category_id.value)

    async def _load(self, tenant_id: str, contact_id: ContactId) -> Contact:
        contact = await self._contact_repository.get(tenant_id, contact_id)
        if contact is None:
            self._probe.contact_not_found(contact_id.value)
            raise NotFoundError("Contact", contact_id.value)
        return contact

    async def _require_category(self, tenant_id: str, category_id: CategoryId) -> None:
        if await self._category_repository.get(tenant_id, category_id) is None:
            raise NotFoundError("Category", category_id.value)
