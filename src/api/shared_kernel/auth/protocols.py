"""Principal resolution port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from shared_kernel.auth.principal import Principal


@runtime_checkable
class PrincipalResolver(Protocol):
    """Resolves the caller of an HTTP request.

    Implementations verify credentials; the request pipeline only consumes
    the outcome.
    """

    async def resolve(self, headers: Mapping[str, str]) -> Principal | None:
        """Resolve the principal from request headers.

        Args:
            headers: Case-insensitive mapping of request headers

        Returns:
            The authenticated principal, the anonymous placeholder when
            credentials are missing or invalid, or None when no principal
            can be attached at all
        """
        ...
