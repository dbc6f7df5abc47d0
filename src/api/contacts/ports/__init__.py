"""Ports (interfaces) for the contacts bounded context."""

from contacts.ports.repositories import (
    ICategoryContactLinkRepository,
    ICategoryRepository,
    IContactRepository,
)

__all__ = [
    "ICategoryContactLinkRepository",
    "ICategoryRepository",
    "IContactRepository",
]
