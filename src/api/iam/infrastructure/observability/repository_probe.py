"""Domain probe for IAM repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to tenant repository operations.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class TenantRepositoryProbe(Protocol):
    """Domain probe for tenant repository operations."""

    def tenant_saved(self, tenant_id: str) -> None:
        """Record that a tenant was successfully saved."""
        ...

    def tenant_retrieved(self, tenant_id: str) -> None:
        """Record that a tenant was retrieved."""
        ...

    def tenants_listed(self, count: int, total: int) -> None:
        """Record that a page of tenants was listed."""
        ...

    def tenant_deleted(self, tenant_id: str) -> None:
        """Record that a tenant was deleted."""
        ...

    def duplicate_username(self, username: str) -> None:
        """Record that a duplicate username was detected."""
        ...


class DefaultTenantRepositoryProbe:
    """Default implementation of TenantRepositoryProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def tenant_saved(self, tenant_id: str) -> None:
        """Record that a tenant was successfully saved."""
        self._logger.info("tenant_saved", tenant_id=tenant_id)

    def tenant_retrieved(self, tenant_id: str) -> None:
        """Record that a tenant was retrieved."""
        self._logger.debug("tenant_retrieved", tenant_id=tenant_id)

    def tenants_listed(self, count: int, total: int) -> None:
        """Record that a page of tenants was listed."""
        self._logger.debug("tenants_listed", count=count, total=total)

    def tenant_deleted(self, tenant_id: str) -> None:
        """Record that a tenant was deleted."""
        self._logger.info("tenant_deleted", tenant_id=tenant_id)

    def duplicate_username(self, username: str) -> None:
        """Record that a duplicate username was detected."""
        self._logger.warning("duplicate_username", username=username)
