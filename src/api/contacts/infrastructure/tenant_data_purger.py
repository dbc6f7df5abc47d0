"""Removes a tenant's categories, contacts and links.

Implements the IAM ``ITenantDataPurger`` port structurally; the contacts
context does not import IAM.
"""

from __future__ import annotations

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from contacts.infrastructure.models import (
    CategoryContactLinkModel,
    CategoryModel,
    ContactModel,
)
from contacts.infrastructure.observability import (
    DefaultLinkRepositoryProbe,
    LinkRepositoryProbe,
)


class ContactsTenantDataPurger:
    """Deletes every contacts-context row owned by a tenant.

    Runs inside the caller's transaction; links go first so no edge ever
    points at a deleted row.
    """

    def __init__(
        self,
        session: AsyncSession,
        probe: LinkRepositoryProbe | None = None,
    ) -> None:
        self._session = session
        self._probe = probe or DefaultLinkRepositoryProbe()

    async def purge_tenant(self, tenant_id: str) -> int:
        """Delete all links, contacts and categories of ``tenant_id``.

        Returns:
            Number of rows removed
        """
        tenant_categories = select(CategoryModel.id).where(
            CategoryModel.tenant_id == tenant_id
        )
        tenant_contacts = select(ContactModel.id).where(
            ContactModel.tenant_id == tenant_id
        )

        statements = [
            delete(CategoryContactLinkModel).where(
                or_(
                    CategoryContactLinkModel.category_id.in_(tenant_categories),
                    CategoryContactLinkModel.contact_id.in_(tenant_contacts),
                )
            ),
            delete(ContactModel).where(ContactModel.tenant_id == tenant_id),
            delete(CategoryModel).where(CategoryModel.tenant_id == tenant_id),
        ]

        removed = 0
        for stmt in statements:
            result = await self._session.execute(
                stmt.execution_options(synchronize_session=False)
            )
            removed += result.rowcount

        self._probe.tenant_data_purged(tenant_id, rows=removed)
        return removed
