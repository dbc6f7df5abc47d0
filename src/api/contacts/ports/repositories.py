"""Repository protocols (ports) for the contacts bounded context.

Category and contact repositories take the tenant id explicitly and never
return a row owned by another tenant. The link repository is pure edge
storage: callers resolve ownership of both ends before touching it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from contacts.domain.aggregates import Category, Contact
from contacts.domain.value_objects import CategoryId, ContactId, EntityKind
from shared_kernel.pagination import PageRequest, PagedResult


@runtime_checkable
class ICategoryRepository(Protocol):
    """Repository for Category aggregate persistence."""

    async def save(self, category: Category) -> None:
        """Insert or update a category."""
        ...

    async def get(self, tenant_id: str, category_id: CategoryId) -> Category | None:
        """Retrieve a category owned by ``tenant_id``.

        Returns:
            The Category, or None if absent or owned by another tenant
        """
        ...

    async def search(
        self,
        tenant_id: str,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Category]:
        """List the tenant's categories.

        Raises:
            ValidationError: If the sort field is not supported
        """
        ...

    async def search_for_contact(
        self,
        tenant_id: str,
        contact_id: ContactId,
        name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Category]:
        """List the tenant's categories linked to a contact."""
        ...

    async def delete(self, category: Category) -> bool:
        """Delete a category row.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IContactRepository(Protocol):
    """Repository for Contact aggregate persistence."""

    async def save(self, contact: Contact) -> None:
        """Insert or update a contact (links are not touched)."""
        ...

    async def get(self, tenant_id: str, contact_id: ContactId) -> Contact | None:
        """Retrieve a contact owned by ``tenant_id`` with its category ids.

        Returns:
            The Contact, or None if absent or owned by another tenant
        """
        ...

    async def search(
        self,
        tenant_id: str,
        name_filter: str | None,
        phone_filter: str | None,
        category_name_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Contact]:
        """List the tenant's contacts.

        ``category_name_filter`` keeps contacts linked to at least one of the
        tenant's categories whose name matches; each contact appears once.
        """
        ...

    async def search_in_category(
        self,
        tenant_id: str,
        category_id: CategoryId,
        name_filter: str | None,
        phone_filter: str | None,
        page_request: PageRequest,
    ) -> PagedResult[Contact]:
        """List the tenant's contacts linked to a category."""
        ...

    async def delete(self, contact: Contact) -> bool:
        """Delete a contact row.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class ICategoryContactLinkRepository(Protocol):
    """Storage for category/contact edges."""

    async def link(self, category_id: str, contact_id: str) -> bool:
        """Create the edge unless it exists.

        Returns:
            True if a new edge was stored, False if it was already present
        """
        ...

    async def unlink(self, category_id: str, contact_id: str) -> bool:
        """Remove the edge if it exists.

        Returns:
            True if an edge was removed
        """
        ...

    async def unlink_all_for(self, entity_id: str, entity_kind: EntityKind) -> int:
        """Remove every edge touching the entity.

        Returns:
            Number of edges removed
        """
        ...

    async def linked_ids(self, entity_id: str, entity_kind: EntityKind) -> set[str]:
        """Return the ids on the other side of the entity's edges."""
        ...
