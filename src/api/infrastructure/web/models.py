"""Base response/request models for the HTTP API."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shared_kernel.pagination import PagedResult

ItemT = TypeVar("ItemT")


class ApiModel(BaseModel):
    """Base model exposing camelCase JSON field names.

    Request bodies accept both the camelCase alias and the Python name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageResponse(ApiModel, Generic[ItemT]):
    """One page of a listing with paging metadata."""

    items: list[ItemT] = Field(..., description="Items on this page")
    page: int = Field(..., description="0-based page index")
    page_size: int = Field(..., description="Requested page size")
    total_elements: int = Field(..., description="Total number of matches")
    total_pages: int = Field(..., description="Number of pages")

    @classmethod
    def from_result(cls, result: PagedResult, items: list[ItemT]) -> PageResponse[ItemT]:
        """Wrap converted ``items`` with the paging metadata of ``result``."""
        return cls(
            items=items,
            page=result.page,
            page_size=result.page_size,
            total_elements=result.total,
            total_pages=result.total_pages,
        )
