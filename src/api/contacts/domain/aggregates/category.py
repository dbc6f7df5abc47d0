"""Category aggregate for the contacts context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from contacts.domain.aggregates._validation import require_text
from contacts.domain.value_objects import CategoryId


@dataclass
class Category:
    """A named grouping of contacts, owned by exactly one tenant.

    The owning tenant is fixed at creation; no operation moves a category
    to another tenant.
    """

    id: CategoryId
    tenant_id: str
    category_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(cls, tenant_id: str, category_name: str) -> Category:
        """Factory method for creating a new category.

        Raises:
            ValidationError: If the name is blank
        """
        now = datetime.now(UTC)
        return cls(
            id=CategoryId.generate(),
            tenant_id=tenant_id,
            category_name=require_text(category_name, "categoryName"),
            created_at=now,
            updated_at=now,
        )

    def rename(self, category_name: str) -> None:
        """Change the category name.

        Raises:
            ValidationError: If the name is blank
        """
        self.category_name = require_text(category_name, "categoryName")
        self.updated_at = datetime.now(UTC)
