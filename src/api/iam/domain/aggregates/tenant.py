"""Tenant aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from iam.domain.value_objects import Role, TenantId
from shared_kernel.exceptions import ValidationError


def _require_text(value: str | None, field_name: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} must not be blank")
    return value.strip()


@dataclass
class Tenant:
    """Tenant aggregate representing an organization in the system.

    Tenants are the top-level isolation boundary: every category and contact
    belongs to exactly one tenant. A tenant is also the login identity, so
    its username is unique across the whole system.

    Business rules:
    - name and username must not be blank
    - the credential is stored only as a one-way hash
    - created_at/updated_at are assigned by the system
    """

    id: TenantId
    name: str
    username: str
    password_hash: str
    role: Role
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        username: str,
        password_hash: str,
        role: Role = Role.USER,
        description: str | None = None,
    ) -> Tenant:
        """Factory method for creating a new tenant.

        Args:
            name: Display name of the organization
            username: Globally unique login name
            password_hash: Already-hashed credential
            role: ADMIN or USER
            description: Optional free text

        Returns:
            A new Tenant aggregate with a generated id

        Raises:
            ValidationError: If name or username is blank
        """
        now = datetime.now(UTC)
        return cls(
            id=TenantId.generate(),
            name=_require_text(name, "name"),
            username=_require_text(username, "username"),
            password_hash=password_hash,
            role=role,
            description=(description or "").strip(),
            created_at=now,
            updated_at=now,
        )

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        username: str | None = None,
        password_hash: str | None = None,
        role: Role | None = None,
    ) -> None:
        """Apply a partial update; None leaves a field unchanged.

        Raises:
            ValidationError: If name or username is given but blank
        """
        if name is not None:
            self.name = _require_text(name, "name")
        if description is not None:
            self.description = description.strip()
        if username is not None:
            self.username = _require_text(username, "username")
        if password_hash is not None:
            self.password_hash = password_hash
        if role is not None:
            self.role = role
        self.updated_at = datetime.now(UTC)

    @property
    def is_admin(self) -> bool:
        """Whether this tenant holds the ADMIN role."""
        return self.role is Role.ADMIN
