"""Shared middleware for cross-cutting concerns.

The AccessGate authorizes every request and binds it to its tenant through
the request-scoped TenantContext; the ASGI middleware runs the gate around
the application.
"""

from shared_kernel.middleware.access_gate import (
    ADMIN_PATH_PREFIX,
    ERROR_PATH,
    FORBIDDEN_MESSAGE,
    UNAUTHENTICATED_MESSAGE,
    AccessDecision,
    AccessGate,
)
from shared_kernel.middleware.tenant_context import (
    TenantContext,
    TenantContextNotSetError,
    tenant_context,
)

__all__ = [
    "ADMIN_PATH_PREFIX",
    "AccessDecision",
    "AccessGate",
    "ERROR_PATH",
    "FORBIDDEN_MESSAGE",
    "TenantContext",
    "TenantContextNotSetError",
    "UNAUTHENTICATED_MESSAGE",
    "tenant_context",
]
