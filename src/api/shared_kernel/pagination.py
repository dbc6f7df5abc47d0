"""Pagination primitives shared across bounded contexts.

Pages are 0-based. A ``PagedResult`` always carries the total number of
matching rows so clients can render paging controls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from shared_kernel.exceptions import ValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class SortDirection(StrEnum):
    """Sort order for listing queries."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str | SortDirection) -> SortDirection:
        """Parse a direction case-insensitively.

        Raises:
            ValidationError: If the value is neither ASC nor DESC
        """
        try:
            return cls(str(value).upper())
        except ValueError as e:
            raise ValidationError(f"Invalid sort direction: {value}") from e


@dataclass(frozen=True)
class PageRequest:
    """Requested slice and ordering of a listing query.

    Attributes:
        page: 0-based page index
        page_size: Maximum items per page (1..MAX_PAGE_SIZE)
        sort_field: API-level field name, resolved by each repository
        sort_direction: ASC or DESC
    """

    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_field: str | None = None
    sort_direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError("page must be >= 0")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValidationError(f"pageSize must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return self.page * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results plus the total match count."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed for ``total`` items."""
        return math.ceil(self.total / self.page_size) if self.total else 0

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> PagedResult[T]:
        """Build a result for the given request."""
        return cls(
            items=items,
            total=total,
            page=request.page,
            page_size=request.page_size,
        )
