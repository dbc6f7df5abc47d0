"""Pydantic models for category API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from contacts.domain.aggregates import Category
from infrastructure.web.models import ApiModel


class CategoryRequest(ApiModel):
    """Request model for creating a category."""

    category_name: str = Field(..., description="Category name")


class CategoryUpdateRequest(ApiModel):
    """Request model for a partial category update; omitted fields are kept."""

    category_name: str | None = Field(default=None, description="New category name")

class CategoryResponse(ApiModel):
    """Response model for category."""

    id: str = Field(..., description="Category ID (ULID format)")
    category_name: str = Field(..., description="Category name")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update")

    @classmethod
    def from_domain(cls, category: Category) -> CategoryResponse:
        """Convert domain Category aggregate to API response."""
        return cls(
            id=category.id.value,
            category_name=category.category_name,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
