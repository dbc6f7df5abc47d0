"""SQLAlchemy ORM models for the contacts bounded context."""

from contacts.infrastructure.models.category import CategoryModel
from contacts.infrastructure.models.contact import ContactModel
from contacts.infrastructure.models.link import CategoryContactLinkModel

__all__ = [
    "CategoryContactLinkModel",
    "CategoryModel",
    "ContactModel",
]
