"""Pydantic models for contact API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from contacts.domain.aggregates import Contact
from infrastructure.web.models import ApiModel


class ContactRequest(ApiModel):
    """Request model for creating or replacing a contact."""

    contact_name: str = Field(..., description="Contact name")
    phone: str = Field(..., description="Phone number")


class ContactResponse(ApiModel):
    """Response model for contact."""

    id: str = Field(..., description="Contact ID (ULID format)")
    contact_name: str = Field(..., description="Contact name")
    phone: str = Field(..., description="Phone number")
    category_ids: list[str] = Field(
        default_factory=list, description="IDs of linked categories"
    )
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update")

    @classmethod
    def from_domain(cls, contact: Contact) -> ContactResponse:
        """Convert domain Contact aggregate to API response.

        Category ids are sorted so responses are stable.
        """
        return cls(
            id=contact.id.value,
            contact_name=contact.contact_name,
            phone=contact.phone,
            category_ids=sorted(contact.category_ids),
            created_at=contact.created_at,
            updated_at=contact.updated_at,
        )
