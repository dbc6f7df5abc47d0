"""Request authorization gate.

The AccessGate runs before every business operation. It validates the
resolved principal, enforces the admin namespace, and binds ordinary
requests to the principal's tenant. ``finish`` releases that binding and
must run after every allowed request, whatever its outcome; ``guard``
packages both steps so the release cannot be skipped.

Path convention:
    /error      always allowed, no tenant context
    /admin/**   ADMIN role required, no tenant context
    other       authenticated principal required, tenant context set
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import structlog

from shared_kernel.auth.principal import Principal, Role
from shared_kernel.middleware.observability import (
    AccessGateProbe,
    DefaultAccessGateProbe,
)
from shared_kernel.middleware.tenant_context import TenantContext, tenant_context

ERROR_PATH = "/error"
ADMIN_PATH_PREFIX = "/admin/"

UNAUTHENTICATED_MESSAGE = "Authentication required"
FORBIDDEN_MESSAGE = "Admin access required"


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of authorizing one request.

    Attributes:
        allowed: Whether the request may proceed
        status_code: HTTP status to answer with when denied
        message: Plain-text body to answer with when denied
    """

    allowed: bool
    status_code: int | None = None
    message: str | None = None

    @classmethod
    def allow(cls) -> AccessDecision:
        return cls(allowed=True)

    @classmethod
    def deny(cls, status_code: int, message: str) -> AccessDecision:
        return cls(allowed=False, status_code=status_code, message=message)

    @classmethod
    def unauthenticated(cls) -> AccessDecision:
        return cls.deny(401, UNAUTHENTICATED_MESSAGE)

    @classmethod
    def forbidden(cls) -> AccessDecision:
        return cls.deny(403, FORBIDDEN_MESSAGE)


class AccessGate:
    """Gatekeeper that authorizes requests and scopes them to a tenant."""

    def __init__(
        self,
        context: TenantContext | None = None,
        probe: AccessGateProbe | None = None,
    ) -> None:
        """Initialize the gate.

        Args:
            context: Tenant context to populate (defaults to the process-wide
                accessor)
            probe: Optional domain probe for observability
        """
        self._context = context or tenant_context
        self._probe = probe or DefaultAccessGateProbe()

    def authorize(self, path: str, principal: Principal | None) -> AccessDecision:
        """Decide whether a request may proceed.

        Denials leave the tenant context untouched. Evaluated once per
        request; there are no retries.

        Args:
            path: Request path
            principal: Resolved principal, or None when none is attached

        Returns:
            Allow, or deny with 401/403 and the fixed message
        """
        if path == ERROR_PATH:
            self._probe.error_path_bypassed(path)
            return AccessDecision.allow()

        if principal is None or not principal.authenticated or principal.is_anonymous:
            self._probe.authentication_missing(path)
            return AccessDecision.unauthenticated()

        if path.startswith(ADMIN_PATH_PREFIX):
            if principal.role is not Role.ADMIN:
                self._probe.admin_access_denied(path, principal.username)
                return AccessDecision.forbidden()
            # Admin operations span all tenants
            self._probe.admin_access_granted(path, principal.username)
            return AccessDecision.allow()

        self._context.set(principal.tenant_id)
        structlog.contextvars.bind_contextvars(tenant_id=principal.tenant_id)
        self._probe.tenant_context_set(principal.tenant_id, principal.username)
        return AccessDecision.allow()

    def finish(self) -> None:
        """Release the tenant context of the current request.

        Unconditional and idempotent.
        """
        self._context.clear()
        structlog.contextvars.unbind_contextvars("tenant_id")
        self._probe.tenant_context_cleared()

    @contextmanager
    def guard(self, path: str, principal: Principal | None) -> Iterator[AccessDecision]:
        """Authorize a request and guarantee cleanup for allowed ones.

        Callers must check ``decision.allowed`` inside the block and only run
        business logic when it is true. ``finish`` runs when the block exits,
        normally or by exception.

        Usage:
            with gate.guard(path, principal) as decision:
                if not decision.allowed:
                    return deny(decision)
                return await handler()
        """
        decision = self.authorize(path, principal)
        if not decision.allowed:
            yield decision
            return

        try:
            yield decision
        finally:
            self.finish()
