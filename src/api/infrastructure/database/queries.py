"""Shared query helpers for filtered, sorted, paginated listings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shared_kernel.exceptions import ValidationError
from shared_kernel.pagination import PageRequest, SortDirection


def _normalize(field: str) -> str:
    # "categoryName", "category_name" and "CATEGORYNAME" name the same field
    return field.replace("_", "").lower()


def contains_ignore_case(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    return func.lower(column).contains(value.lower(), autoescape=True)


def resolve_sort_column(
    sort_columns: Mapping[str, Any],
    sort_field: str | None,
    default_field: str,
) -> Any:
    """Map an API sort field name onto a column.

    Args:
        sort_columns: API field name -> column
        sort_field: Requested field, or None for the default
        default_field: Field used when none is requested

    Raises:
        ValidationError: If the field is not sortable
    """
    normalized = {_normalize(name): column for name, column in sort_columns.items()}
    requested = _normalize(sort_field or default_field)
    if requested not in normalized:
        allowed = ", ".join(sorted(sort_columns))
        raise ValidationError(f"Cannot sort by '{sort_field}'. Allowed: {allowed}")
    return normalized[requested]


async def fetch_page(
    session: AsyncSession,
    stmt: Select[Any],
    page_request: PageRequest,
    sort_columns: Mapping[str, Any],
    default_sort: str,
    tiebreaker: Any,
) -> tuple[list[Any], int]:
    """Execute ``stmt`` as one page plus a total count.

    The count is taken over the unpaginated statement, so the total is
    independent of the page requested. ``tiebreaker`` (normally the primary
    key) keeps the order stable when sort values repeat. Pages starting
    at or beyond the total are answered empty without running a page query.

    Returns:
        (ORM rows for the page, total number of matching rows)
    """
    column = resolve_sort_column(sort_columns, page_request.sort_field, default_sort)

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    if page_request.offset >= total:
        # Past the last row; the offset may not even fit the database integer
        return [], total

    if page_request.sort_direction is SortDirection.DESC:
        ordering = (column.desc(), tiebreaker.desc())
    else:
        ordering = (column.asc(), tiebreaker.asc())

    page_stmt = (
        stmt.order_by(*ordering)
        .offset(page_request.offset)
        .limit(page_request.page_size)
    )
    result = await session.execute(page_stmt)
    return list(result.scalars().all()), total
