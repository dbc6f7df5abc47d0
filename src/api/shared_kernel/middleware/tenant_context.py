"""Request-scoped tenant context.

Holds the identifier of the tenant whose data the current request may touch.
The value lives in a ``ContextVar``: every asyncio task (and every thread
started through ``contextvars.copy_context``) sees its own slot, so
concurrently executing requests never observe or clear each other's tenant.

Nested calls read the tenant through ``tenant_context.require()`` instead of
threading it through every signature.

Usage:
    with tenant_context.scope(principal.tenant_id):
        await service.list_categories(...)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token


class TenantContextNotSetError(RuntimeError):
    """Raised when tenant-scoped code runs without a tenant context.

    Indicates a wiring error (a tenant-scoped operation reached outside the
    AccessGate), never a client error.
    """

    def __init__(self) -> None:
        super().__init__("No tenant context is set for the current request")


class TenantContext:
    """Per-request holder of the current tenant identifier."""

    def __init__(self, name: str = "tenant_id") -> None:
        self._var: ContextVar[str | None] = ContextVar(name, default=None)

    def set(self, tenant_id: str) -> Token[str | None]:
        """Bind ``tenant_id`` to the current logical request.

        Returns:
            Token that restores the previous value when passed to ``reset``
        """
        if not tenant_id:
            raise ValueError("tenant_id must not be empty")
        return self._var.set(tenant_id)

    def get(self) -> str | None:
        """Return the current tenant id, or None when not set."""
        return self._var.get()

    def require(self) -> str:
        """Return the current tenant id.

        Raises:
            TenantContextNotSetError: If no tenant is bound
        """
        tenant_id = self._var.get()
        if tenant_id is None:
            raise TenantContextNotSetError()
        return tenant_id

    def clear(self) -> None:
        """Remove any tenant bound to the current logical request."""
        self._var.set(None)

    def reset(self, token: Token[str | None]) -> None:
        """Restore the value that was current before ``set`` returned ``token``."""
        self._var.reset(token)

    @property
    def is_set(self) -> bool:
        """Whether a tenant is bound to the current logical request."""
        return self._var.get() is not None

    @contextmanager
    def scope(self, tenant_id: str) -> Iterator[str]:
        """Bind ``tenant_id`` for the duration of the block.

        The previous value is restored on exit, whether the block returns or
        raises.
        """
        token = self.set(tenant_id)
        try:
            yield tenant_id
        finally:
            self.reset(token)


# Process-wide accessor; storage is per request
tenant_context = TenantContext()
