"""Value objects for the contacts domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ulid import ULID


@dataclass(frozen=True)
class CategoryId:
    """Identifier for a Category aggregate (ULID)."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> CategoryId:
        """Generate a new CategoryId using ULID."""
        return cls(value=str(ULID()))


@dataclass(frozen=True)
class ContactId:
    """Identifier for a Contact aggregate (ULID)."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> ContactId:
        """Generate a new ContactId using ULID."""
        return cls(value=str(ULID()))


class EntityKind(StrEnum):
    """Which side of a category/contact link an id belongs to."""

    CATEGORY = "category"
    CONTACT = "contact"
