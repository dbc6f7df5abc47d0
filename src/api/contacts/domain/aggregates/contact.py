"""Contact aggregate for the contacts context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from contacts.domain.aggregates._validation import require_text
from contacts.domain.value_objects import ContactId


@dataclass
class Contact:
    """A person or organization reachable by phone.

    ``category_ids`` is hydrated from the link table when the contact is
    loaded; it is a read-side view, and links are changed only through the
    link repository.
    """

    id: ContactId
    tenant_id: str
    contact_name: str
    phone: str
    category_ids: frozenset[str] = field(default_factory=frozenset)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(cls, tenant_id: str, contact_name: str, phone: str) -> Contact:
        """Factory method for creating a new contact.

        Raises:
            ValidationError: If the name or phone is blank
        """
        now = datetime.now(UTC)
        return cls(
            id=ContactId.generate(),
            tenant_id=tenant_id,
            contact_name=require_text(contact_name, "contactName"),
            phone=require_text(phone, "phone"),
            created_at=now,
            updated_at=now,
        )

    def update(self, contact_name: str, phone: str) -> None:
        """Replace name and phone.

        Raises:
            ValidationError: If the name or phone is blank
        """
        contact_name = require_text(contact_name, "contactName")
        phone = require_text(phone, "phone")
        self.contact_name = contact_name
        self.phone = phone
        self.updated_at = datetime.now(UTC)
