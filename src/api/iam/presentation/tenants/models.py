"""Pydantic models for tenant API requests and responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from iam.domain.aggregates import Tenant
from iam.domain.value_objects import Role
from infrastructure.web.models import ApiModel
from shared_kernel.exceptions import ValidationError


def _parse_role(value: str) -> Role:
    try:
        return Role.parse(value)
    except ValueError as e:
        raise ValidationError(f"Invalid role: {value}") from e


class CreateTenantRequest(ApiModel):
    """Request model for creating a tenant.

    Blank values are rejected by the service with 400, not by the schema.
    """

    name: str = Field(..., description="Tenant name")
    description: str | None = Field(default=None, description="Free text")
    username: str = Field(..., description="Globally unique login name")
    password: str = Field(..., description="Plaintext password, stored hashed")
    role: str = Field(default=Role.USER.value, description="ADMIN or USER")

    def to_domain_role(self) -> Role:
        """Convert API role to domain Role.

        Raises:
            ValidationError: If the role is neither ADMIN nor USER
        """
        return _parse_role(self.role)


class UpdateTenantRequest(ApiModel):
    """Request model for a partial tenant update; omitted fields are kept."""

    name: str | None = Field(default=None, description="Tenant name")
    description: str | None = Field(default=None, description="Free text")
    username: str | None = Field(default=None, description="Login name")
    password: str | None = Field(default=None, description="New password")
    role: str | None = Field(default=None, description="ADMIN or USER")

    def to_domain_role(self) -> Role | None:
        """Convert API role to domain Role, if one was given."""
        return _parse_role(self.role) if self.role is not None else None


class TenantResponse(ApiModel):
    """Response model for tenant. Never carries the password hash."""

    id: str = Field(..., description="Tenant ID (ULID format)")
    name: str = Field(..., description="Tenant name")
    description: str = Field(..., description="Free text")
    username: str = Field(..., description="Login name")
    role: str = Field(..., description="ADMIN or USER")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update")

    @classmethod
    def from_domain(cls, tenant: Tenant) -> TenantResponse:
        """Convert domain Tenant aggregate to API response.

        Args:
            tenant: Tenant domain aggregate

        Returns:
            TenantResponse
        """
        return cls(
            id=tenant.id.value,
            name=tenant.name,
            description=tenant.description,
            username=tenant.username,
            role=tenant.role.value,
            created_at=tenant.created_at,
            updated_at=tenant.updated_at,
        )
