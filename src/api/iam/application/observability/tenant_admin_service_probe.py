"""Protocol for tenant administration service observability.

Defines the interface for domain probes that capture application-level
domain events for tenant lifecycle operations.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class TenantAdminServiceProbe(Protocol):
    """Domain probe for tenant administration operations."""

    def tenant_created(self, tenant_id: str, username: str, role: str) -> None:
        """Record that a tenant was created."""
        ...

    def tenant_updated(self, tenant_id: str) -> None:
        """Record that a tenant was updated."""
        ...

    def tenant_deleted(self, tenant_id: str, purged_rows: int) -> None:
        """Record that a tenant and its data were deleted."""
        ...

    def tenant_not_found(self, tenant_id: str) -> None:
        """Record that a tenant was not found."""
        ...

    def duplicate_username(self, username: str) -> None:
        """Record that a duplicate username was rejected."""
        ...


class DefaultTenantAdminServiceProbe:
    """Default implementation of TenantAdminServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def tenant_created(self, tenant_id: str, username: str, role: str) -> None:
        """Record that a tenant was created."""
        self._logger.info(
            "tenant_created",
            tenant_id=tenant_id,
            username=username,
            role=role,
        )

    def tenant_updated(self, tenant_id: str) -> None:
        """Record that a tenant was updated."""
        self._logger.info("tenant_updated", tenant_id=tenant_id)

    def tenant_deleted(self, tenant_id: str, purged_rows: int) -> None:
        """Record that a tenant and its data were deleted."""
        self._logger.info(
            "tenant_deleted",
            tenant_id=tenant_id,
            purged_rows=purged_rows,
        )

    def tenant_not_found(self, tenant_id: str) -> None:
        """Record that a tenant was not found."""
        self._logger.debug("tenant_not_found", tenant_id=tenant_id)

    def duplicate_username(self, username: str) -> None:
        """Record that a duplicate username was rejected."""
        self._logger.warning("duplicate_username", username=username)
