"""HTTP routes for tenant administration.

Mounted under ``/admin``; the AccessGate admits only ADMIN principals
there, so handlers perform no further role checks.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from iam.application.services import TenantAdminService
from iam.dependencies.tenant import get_tenant_admin_service
from iam.domain.value_objects import TenantId
from iam.presentation.tenants.models import (
    CreateTenantRequest,
    TenantResponse,
    UpdateTenantRequest,
)
from infrastructure.web.models import PageResponse
from infrastructure.web.pagination import get_page_request
from shared_kernel.pagination import PageRequest

router = APIRouter(
    prefix="/tenants",
    tags=["tenants"],
)


@router.get("")
async def list_tenants(
    service: Annotated[TenantAdminService, Depends(get_tenant_admin_service)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    name: Annotated[str | None, Query(description="Name contains")] = None,
) -> PageResponse[TenantResponse]:
    """List tenants, optionally filtered by name.

    Sortable by name (default), username, id, createdAt, updatedAt.

    Raises:
        400: Invalid paging or sort parameters
    """
    result = await service.list_tenants(name_filter=name, page_request=page_request)
    return PageResponse[TenantResponse].from_result(
        result, [TenantResponse.from_domain(t) for t in result.items]
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tenant(
    request: CreateTenantRequest,
    service: Annotated[TenantAdminService, Depends(get_tenant_admin_service)],
) -> TenantResponse:
    """Create a tenant.

    Raises:
        400: Blank field, unknown role, or username already taken
    """
    tenant = await service.create_tenant(
        name=request.name,
        username=request.username,
        password=request.password,
        role=request.to_domain_role(),
        description=request.description,
    )
    return TenantResponse.from_domain(tenant)


@router.get("/{tenant_id}")
async def get_tenant(
    tenant_id: str,
    service: Annotated[TenantAdminService, Depends(get_tenant_admin_service)],
) -> TenantResponse:
    """Get tenant by ID.

    Raises:
        404: Tenant not found
    """
    tenant = await service.get_tenant(TenantId(value=tenant_id))
    return TenantResponse.from_domain(tenant)


@router.put("/{tenant_id}")
async def update_tenant(
    tenant_id: str,
    request: UpdateTenantRequest,
    service: Annotated[TenantAdminService, Depends(get_tenant_admin_service)],
) -> TenantResponse:
    """Update a tenant; omitted fields keep their values.

    Raises:
        400: Blank field, unknown role, or username already taken
        404: Tenant not found
    """
    tenant = await service.update_tenant(
        TenantId(value=tenant_id),
        name=request.name,
        description=request.description,
        username=request.username,
        password=request.password,
        role=request.to_domain_role(),
    )
    return TenantResponse.from_domain(tenant)


@router.delete(
    "/{tenant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        204: {"description": "Tenant and its data deleted"},
        404: {"description": "Tenant not found"},
    },
)
async def delete_tenant(
    tenant_id: str,
    service: Annotated[TenantAdminService, Depends(get_tenant_admin_service)],
) -> None:
    """Delete a tenant together with its categories, contacts and links."""
    await service.delete_tenant(TenantId(value=tenant_id))
