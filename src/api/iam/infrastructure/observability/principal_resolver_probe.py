"""Domain probe for HTTP Basic principal resolution."""

from __future__ import annotations

from typing import Protocol

import structlog


class PrincipalResolverProbe(Protocol):
    """Domain probe for credential verification outcomes."""

    def principal_resolved(self, tenant_id: str, username: str) -> None:
        """Record that credentials were verified."""
        ...

    def credentials_missing(self) -> None:
        """Record that the request carried no Basic credentials."""
        ...

    def credentials_malformed(self, reason: str) -> None:
        """Record that the Authorization header could not be decoded."""
        ...

    def credentials_rejected(self, username: str) -> None:
        """Record that the username or password did not match."""
        ...


class DefaultPrincipalResolverProbe:
    """Default implementation of PrincipalResolverProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def principal_resolved(self, tenant_id: str, username: str) -> None:
        """Record that credentials were verified."""
        self._logger.debug(
            "principal_resolved",
            tenant_id=tenant_id,
            username=username,
        )

    def credentials_missing(self) -> None:
        """Record that the request carried no Basic credentials."""
        self._logger.debug("credentials_missing")

    def credentials_malformed(self, reason: str) -> None:
        """Record that the Authorization header could not be decoded."""
        self._logger.warning("credentials_malformed", reason=reason)

    def credentials_rejected(self, username: str) -> None:
        """Record that the username or password did not match."""
        self._logger.warning("credentials_rejected", username=username)
