"""HTTP routes for contacts of the current tenant."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from contacts.application.services import ContactService
from contacts.dependencies import get_contact_service
from contacts.domain.value_objects import CategoryId, ContactId
from contacts.presentation.categories.models import CategoryResponse
from contacts.presentation.contacts.models import ContactRequest, ContactResponse
from infrastructure.web.models import PageResponse
from infrastructure.web.pagination import get_page_request
from shared_kernel.pagination import PageRequest

router = APIRouter(
    prefix="/contacts",
    tags=["contacts"],
)


@router.get("")
async def list_contacts(
    service: Annotated[ContactService, Depends(get_contact_service)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    contact_name: Annotated[
        str | None, Query(alias="contactName", description="Name contains")
    ] = None,
    phone: Annotated[str | None, Query(description="Phone contains")] = None,
    category_name: Annotated[
        str | None,
        Query(alias="categoryName", description="In a category whose name contains"),
    ] = None,
) -> PageResponse[ContactResponse]:
    """List contacts with optional name, phone and category filters.

    Sortable by contactName (default), phone, id, createdAt, updatedAt.

    Raises:
        400: Invalid paging or sort parameters
    """
    result = await service.list_contacts(
        name_filter=contact_name,
        phone_filter=phone,
        category_name_filter=category_name,
        page_request=page_request,
    )
    return PageResponse[ContactResponse].from_result(
        result, [ContactResponse.from_domain(c) for c in result.items]
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_contact(
    request: ContactRequest,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Create a contact.

    Raises:
        400: Blank name or phone
    """
    contact = await service.create_contact(request.contact_name, request.phone)
    return ContactResponse.from_domain(contact)


@router.get("/{contact_id}")
async def get_contact(
    contact_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Get contact by ID.

    Raises:
        404: Contact not found
    """
    contact = await service.get_contact(ContactId(value=contact_id))
    return ContactResponse.from_domain(contact)


@router.put("/{contact_id}")
async def update_contact(
    contact_id: str,
    request: ContactRequest,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Replace a contact's name and phone.

    Raises:
        400: Blank name or phone
        404: Contact not found
    """
    contact = await service.update_contact(
        ContactId(value=contact_id),
        contact_name=request.contact_name,
        phone=request.phone,
    )
    return ContactResponse.from_domain(contact)


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Contact and its links deleted"},
        404: {"description": "Contact not found"},
    },
)
async def delete_contact(
    contact_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> None:
    """Delete a contact; its categories are kept, their links removed."""
    await service.delete_contact(ContactId(value=contact_id))


@router.get("/{contact_id}/categories")
async def list_categories_of_contact(
    contact_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    category_name: Annotated[
        str | None, Query(alias="categoryName", description="Name contains")
    ] = None,
) -> PageResponse[CategoryResponse]:
    """List the categories a contact belongs to.

    Raises:
        400: Invalid paging or sort parameters
        404: Contact not found
    """
    result = await service.list_categories_of(
        ContactId(value=contact_id),
        name_filter=category_name,
        page_request=page_request,
    )
    return PageResponse[CategoryResponse].from_result(
        result, [CategoryResponse.from_domain(c) for c in result.items]
    )


@router.put("/{contact_id}/categories/{category_id}")
async def assign_category(
    contact_id: str,
    category_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    """Place a contact in a category. Repeating the call changes nothing.

    Raises:
        404: Contact or category not found
    """
    contact = await service.assign_category(
        ContactId(value=contact_id), CategoryId(value=category_id)
    )
    return ContactResponse.from_domain(contact)


@router.delete(
    "/{contact_id}/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Contact removed from the category"},
        404: {"description": "Contact or category not found"},
    },
)
async def remove_category(
    contact_id: str,
    category_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> None:
    """Take a contact out of a category."""
    await service.remove_category(
        ContactId(value=contact_id), CategoryId(value=category_id)
    )
