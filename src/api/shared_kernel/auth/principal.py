"""Authenticated principal value object.

A principal is resolved once per request by a ``PrincipalResolver``. Its
role is parsed into the closed ``Role`` enumeration at that point so that
every later comparison is plain enum equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    """Tenant roles."""

    ADMIN = "ADMIN"
    USER = "USER"

    @classmethod
    def parse(cls, value: str | Role) -> Role:
        """Parse a role name case-insensitively.

        Raises:
            ValueError: If the value names no known role
        """
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            raise ValueError(f"Unknown role: {value!r}") from e


@dataclass(frozen=True)
class Principal:
    """The caller on whose behalf a request executes.

    Attributes:
        tenant_id: Identifier of the tenant the caller authenticated as
        username: Login name of that tenant
        role: Role decided at resolution time
        authenticated: Whether credentials were verified
    """

    tenant_id: str
    username: str
    role: Role
    authenticated: bool = True

    @property
    def is_anonymous(self) -> bool:
        """Whether this is the anonymous placeholder."""
        return self == ANONYMOUS_PRINCIPAL

    @property
    def is_admin(self) -> bool:
        """Whether the principal holds the ADMIN role."""
        return self.role is Role.ADMIN


ANONYMOUS_PRINCIPAL = Principal(
    tenant_id="",
    username="anonymousUser",
    role=Role.USER,
    authenticated=False,
)
