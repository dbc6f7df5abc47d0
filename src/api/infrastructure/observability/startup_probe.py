"""Domain probe for application startup and lifecycle events."""

from __future__ import annotations

from typing import Protocol

import structlog


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def admin_tenant_bootstrapped(self, tenant_id: str, username: str) -> None:
        """Record that the bootstrap admin tenant was created."""
        ...

    def admin_tenant_already_exists(self, tenant_id: str, username: str) -> None:
        """Record that the bootstrap admin tenant already existed."""
        ...

    def admin_bootstrap_disabled(self) -> None:
        """Record that no bootstrap admin is configured."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def admin_tenant_bootstrapped(self, tenant_id: str, username: str) -> None:
        """Record that the bootstrap admin tenant was created."""
        self._logger.info(
            "admin_tenant_bootstrapped",
            tenant_id=tenant_id,
            username=username,
        )

    def admin_tenant_already_exists(self, tenant_id: str, username: str) -> None:
        """Record that the bootstrap admin tenant already existed."""
        self._logger.debug(
            "admin_tenant_already_exists",
            tenant_id=tenant_id,
            username=username,
        )

    def admin_bootstrap_disabled(self) -> None:
        """Record that no bootstrap admin is configured."""
        self._logger.debug("admin_bootstrap_disabled")
