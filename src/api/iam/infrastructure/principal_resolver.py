"""HTTP Basic principal resolution backed by the tenant store.

Runs inside the ASGI middleware, ahead of FastAPI's dependency system, so it
opens its own short-lived session from the application sessionmaker.
"""

from __future__ import annotations

import base64
import binascii
import functools
from collections.abc import Callable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iam.application.security import hash_password, verify_password
from iam.infrastructure.observability import (
    DefaultPrincipalResolverProbe,
    PrincipalResolverProbe,
)
from iam.infrastructure.tenant_repository import TenantRepository
from shared_kernel.auth.principal import ANONYMOUS_PRINCIPAL, Principal

BASIC_SCHEME = "basic"


@functools.cache
def _unknown_tenant_hash() -> str:
    # Unknown usernames still pay for one bcrypt check
    return hash_password("unknown-tenant")


def parse_basic_credentials(authorization: str | None) -> tuple[str, str] | None:
    """Decode an ``Authorization: Basic`` header value.

    Returns:
        (username, password), or None when the header is absent or uses
        another scheme

    Raises:
        ValueError: If the header claims Basic but cannot be decoded
    """
    if not authorization:
        return None

    scheme, _, encoded = authorization.partition(" ")
    if scheme.lower() != BASIC_SCHEME:
        return None

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError("Invalid Basic credentials encoding") from e

    username, separator, password = decoded.partition(":")
    if not separator:
        raise ValueError("Basic credentials must be 'username:password'")
    return username, password


class BasicAuthPrincipalResolver:
    """Resolves the principal from HTTP Basic credentials.

    Missing, malformed, or wrong credentials resolve to the anonymous
    principal; the AccessGate turns that into a 401.
    """

    def __init__(
        self,
        sessionmaker_factory: Callable[[], async_sessionmaker[AsyncSession]],
        probe: PrincipalResolverProbe | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            sessionmaker_factory: Returns the application sessionmaker. Called
                per request so the engine can be created lazily.
            probe: Optional domain probe for observability
        """
        self._sessionmaker_factory = sessionmaker_factory
        self._probe = probe or DefaultPrincipalResolverProbe()

    async def resolve(self, headers: Mapping[str, str]) -> Principal | None:
        """Verify Basic credentials against the stored bcrypt hash."""
        try:
            credentials = parse_basic_credentials(headers.get("authorization"))
        except ValueError as e:
            self._probe.credentials_malformed(str(e))
            return ANONYMOUS_PRINCIPAL

        if credentials is None:
            self._probe.credentials_missing()
            return ANONYMOUS_PRINCIPAL

        username, password = credentials
        async with self._sessionmaker_factory()() as session:
            tenant = await TenantRepository(session).get_by_username(username)

        if tenant is not None:
            password_hash = tenant.password_hash
        else:
            password_hash = _unknown_tenant_hash()
        if not verify_password(password, password_hash) or tenant is None:
            self._probe.credentials_rejected(username)
            return ANONYMOUS_PRINCIPAL

        self._probe.principal_resolved(tenant.id.value, tenant.username)
        return Principal(
            tenant_id=tenant.id.value,
            username=tenant.username,
            role=tenant.role,
        )
