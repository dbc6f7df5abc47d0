"""Domain probe for request authorization and tenant scoping.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the AccessGate: bypasses, denials, and the
lifecycle of the request's tenant context.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class AccessGateProbe(Protocol):
    """Domain probe for AccessGate decisions."""

    def error_path_bypassed(self, path: str) -> None:
        """Record that the error-display path was allowed unconditionally."""
        ...

    def authentication_missing(self, path: str) -> None:
        """Record that a request arrived without an authenticated principal."""
        ...

    def admin_access_denied(self, path: str, username: str) -> None:
        """Record that a non-admin principal targeted the admin namespace."""
        ...

    def admin_access_granted(self, path: str, username: str) -> None:
        """Record that an admin principal entered the admin namespace."""
        ...

    def tenant_context_set(self, tenant_id: str, username: str) -> None:
        """Record that the request was bound to a tenant."""
        ...

    def tenant_context_cleared(self) -> None:
        """Record that the request's tenant binding was released."""
        ...


class DefaultAccessGateProbe:
    """Default implementation of AccessGateProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def error_path_bypassed(self, path: str) -> None:
        """Record that the error-display path was allowed unconditionally."""
        self._logger.debug("access_gate_error_path_bypassed", path=path)

    def authentication_missing(self, path: str) -> None:
        """Record that a request arrived without an authenticated principal."""
        self._logger.warning("access_gate_authentication_missing", path=path)

    def admin_access_denied(self, path: str, username: str) -> None:
        """Record that a non-admin principal targeted the admin namespace."""
        self._logger.warning(
            "access_gate_admin_access_denied",
            path=path,
            username=username,
        )

    def admin_access_granted(self, path: str, username: str) -> None:
        """Record that an admin principal entered the admin namespace."""
        self._logger.debug(
            "access_gate_admin_access_granted",
            path=path,
            username=username,
        )

    def tenant_context_set(self, tenant_id: str, username: str) -> None:
        """Record that the request was bound to a tenant."""
        self._logger.debug(
            "tenant_context_set",
            tenant_id=tenant_id,
            username=username,
        )

    def tenant_context_cleared(self) -> None:
        """Record that the request's tenant binding was released."""
        self._logger.debug("tenant_context_cleared")
