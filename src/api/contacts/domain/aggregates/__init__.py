"""Domain aggregates for the contacts context."""

from contacts.domain.aggregates.category import Category
from contacts.domain.aggregates.contact import Contact

__all__ = [
    "Category",
    "Contact",
]
