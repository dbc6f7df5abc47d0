"""Unit tests for AccessGateMiddleware.

Runs a small FastAPI app behind the middleware with a stub principal
resolver keyed on a test header.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated
from unittest.mock import Mock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from infrastructure.web import get_principal
from shared_kernel.auth.principal import ANONYMOUS_PRINCIPAL, Principal, Role
from shared_kernel.middleware.access_gate import AccessGate
from shared_kernel.middleware.asgi import AccessGateMiddleware
from shared_kernel.middleware.observability import AccessGateProbe
from shared_kernel.middleware.tenant_context import tenant_context

PRINCIPALS = {
    "alice": Principal(tenant_id="tenant-a", username="alice", role=Role.USER),
    "bob": Principal(tenant_id="tenant-b", username="bob", role=Role.USER),
    "root": Principal(tenant_id="tenant-root", username="root", role=Role.ADMIN),
}


class HeaderPrincipalResolver:
    """Resolves principals from an ``X-Test-User`` header."""

    def __init__(self) -> None:
        self.calls = 0

    async def resolve(self, headers: Mapping[str, str]) -> Principal | None:
        self.calls += 1
        username = headers.get("x-test-user")
        if username is None:
            return None
        return PRINCIPALS.get(username, ANONYMOUS_PRINCIPAL)


@pytest.fixture
def mock_probe():
    return Mock(spec=AccessGateProbe)


@pytest.fixture
def resolver() -> HeaderPrincipalResolver:
    return HeaderPrincipalResolver()


@pytest.fixture
def test_client(resolver, mock_probe) -> TestClient:
    app = FastAPI()

    @app.get("/whoami")
    async def whoami():
        return {"tenantId": tenant_context.get()}

    @app.get("/admin/whoami")
    async def admin_whoami():
        return {"tenantId": tenant_context.get()}

    @app.get("/error")
    async def error_page():
        return {"tenantId": tenant_context.get()}

    @app.get("/role")
    async def role(principal: Annotated[Principal | None, Depends(get_principal)]):
        return {"role": principal.role.value if principal else None}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("handler failed")

    app.add_middleware(
        AccessGateMiddleware,
        resolver=resolver,
        gate=AccessGate(probe=mock_probe),
        www_authenticate="Basic",
    )
    return TestClient(app, raise_server_exceptions=False)


class TestDenials:
    """Denied requests are answered by the middleware itself."""

    def test_missing_credentials_returns_401_plain_text(self, test_client):
        response = test_client.get("/whoami")

        assert response.status_code == 401
        assert response.text == "Authentication required"
        assert response.headers["content-type"].startswith("text/plain")
        assert response.headers["www-authenticate"] == "Basic"

    def test_unknown_user_returns_401(self, test_client):
        response = test_client.get("/whoami", headers={"X-Test-User": "mallory"})

        assert response.status_code == 401

    def test_user_on_admin_path_returns_403(self, test_client):
        response = test_client.get("/admin/whoami", headers={"X-Test-User": "alice"})

        assert response.status_code == 403
        assert response.text == "Admin access required"
        assert "www-authenticate" not in response.headers


class TestAllowedRequests:
    """Allowed requests run with the right tenant binding."""

    def test_handler_sees_principal_tenant(self, test_client):
        response = test_client.get("/whoami", headers={"X-Test-User": "alice"})

        assert response.status_code == 200
        assert response.json() == {"tenantId": "tenant-a"}

    def test_handler_can_read_resolved_principal(self, test_client):
        response = test_client.get("/role", headers={"X-Test-User": "root"})

        assert response.json() == {"role": "ADMIN"}

    def test_consecutive_requests_do_not_share_tenant(self, test_client):
        first = test_client.get("/whoami", headers={"X-Test-User": "alice"})
        second = test_client.get("/whoami", headers={"X-Test-User": "bob"})

        assert first.json() == {"tenantId": "tenant-a"}
        assert second.json() == {"tenantId": "tenant-b"}

    def test_admin_path_runs_without_tenant(self, test_client):
        response = test_client.get("/admin/whoami", headers={"X-Test-User": "root"})

        assert response.status_code == 200
        assert response.json() == {"tenantId": None}

    def test_error_path_skips_resolution(self, test_client, resolver):
        response = test_client.get("/error")

        assert response.status_code == 200
        assert response.json() == {"tenantId": None}
        assert resolver.calls == 0

    def test_finish_runs_when_handler_raises(self, test_client, mock_probe):
        response = test_client.get("/boom", headers={"X-Test-User": "alice"})

        assert response.status_code == 500
        mock_probe.tenant_context_set.assert_called_once_with("tenant-a", "alice")
        mock_probe.tenant_context_cleared.assert_called_once()

    def test_lifespan_passes_through(self, test_client):
        with test_client as client:
            response = client.get("/whoami", headers={"X-Test-User": "alice"})

        assert response.status_code == 200
