"""HTTP routes for categories of the current tenant."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from contacts.application.services import CategoryService
from contacts.dependencies import get_category_service
from contacts.domain.value_objects import CategoryId
from contacts.presentation.categories.models import (
    CategoryRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from contacts.presentation.contacts.models import ContactResponse
from infrastructure.web.models import PageResponse
from infrastructure.web.pagination import get_page_request
from shared_kernel.pagination import PageRequest

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
)


@router.get("")
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    category_name: Annotated[
        str | None, Query(alias="categoryName", description="Name contains")
    ] = None,
) -> PageResponse[CategoryResponse]:
    """List categories, optionally filtered by name.

    Sortable by categoryName (default), id, createdAt, updatedAt.

    Raises:
        400: Invalid paging or sort parameters
    """
    result = await service.list_categories(
        name_filter=category_name, page_request=page_request
    )
    return PageResponse[CategoryResponse].from_result(
        result, [CategoryResponse.from_domain(c) for c in result.items]
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Create a category.

    Raises:
        400: Blank name
    """
    category = await service.create_category(request.category_name)
    return CategoryResponse.from_domain(category)


@router.get("/{category_id}")
async def get_category(
    category_id: str,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Get category by ID.

    Raises:
        404: Category not found
    """
    category = await service.get_category(CategoryId(value=category_id))
    return CategoryResponse.from_domain(category)


@router.put("/{category_id}")
async def update_category(
    category_id: str,
    request: CategoryUpdateRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryResponse:
    """Update a category; an omitted categoryName keeps the current name.

    Raises:
        400: Blank name
        404: Category not found
    """
    category = await service.update_category(
        CategoryId(value=category_id), request.category_name
    )
    return CategoryResponse.from_domain(category)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Category and its links deleted"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(
    category_id: str,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> None:
    """Delete a category; its contacts are kept, their links removed."""
    await service.delete_category(CategoryId(value=category_id))


@router.get("/{category_id}/contacts")
async def list_contacts_of_category(
    category_id: str,
    service: Annotated[CategoryService, Depends(get_category_service)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    contact_name: Annotated[
        str | None, Query(alias="contactName", description="Name contains")
    ] = None,
    phone: Annotated[str | None, Query(description="Phone contains")] = None,
) -> PageResponse[ContactResponse]:
    """List contacts in a category.

    Sortable by contactName (default), phone, id, createdAt, updatedAt.

    Raises:
        400: Invalid paging or sort parameters
        404: Category not found
    """
    result = await service.list_contacts_of(
        CategoryId(value=category_id),
        contact_name_filter=contact_name,
        phone_filter=phone,
        page_request=page_request,
    )
    return PageResponse[ContactResponse].from_result(
        result, [ContactResponse.from_domain(c) for c in result.items]
    )
