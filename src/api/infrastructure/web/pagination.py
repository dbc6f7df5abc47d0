"""FastAPI dependency parsing paging and sorting query parameters."""

from __future__ import annotations

from typing import Annotated

from fastapi import Query

from shared_kernel.pagination import DEFAULT_PAGE_SIZE, PageRequest, SortDirection


def get_page_request(
    page: Annotated[int, Query(description="0-based page index")] = 0,
    page_size: Annotated[
        int, Query(alias="pageSize", description="Items per page (1-100)")
    ] = DEFAULT_PAGE_SIZE,
    sort_by: Annotated[
        str | None, Query(alias="sortBy", description="Field to sort by")
    ] = None,
    sort_order: Annotated[
        str, Query(alias="sortOrder", description="ASC or DESC")
    ] = SortDirection.ASC.value,
) -> PageRequest:
    """Build a PageRequest from query parameters.

    Out-of-range values raise ValidationError, answered with 400.
    """
    return PageRequest(
        page=page,
        page_size=page_size,
        sort_field=sort_by,
        sort_direction=SortDirection.parse(sort_order),
    )
