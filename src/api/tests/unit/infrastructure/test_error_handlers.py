"""Unit tests for domain error to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from iam.ports.exceptions import DuplicateUsernameError
from infrastructure.web import register_exception_handlers
from shared_kernel.exceptions import ConflictError, NotFoundError, ValidationError
from shared_kernel.middleware.tenant_context import TenantContextNotSetError


@pytest.fixture
def test_client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    errors = {
        "not-found": NotFoundError("Category", "01ABC"),
        "invalid": ValidationError("categoryName must not be blank"),
        "duplicate": DuplicateUsernameError("alice"),
        "conflict": ConflictError("Tenant 01ABC conflicts"),
        "no-tenant": TenantContextNotSetError(),
    }

    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        raise errors[kind]

    return TestClient(app, raise_server_exceptions=False)


class TestErrorMapping:
    """Each error kind answers with its status and message."""

    @pytest.mark.parametrize(
        "kind, status_code",
        [
            ("not-found", 404),
            ("invalid", 400),
            ("duplicate", 400),
            ("conflict", 409),
            ("no-tenant", 500),
        ],
    )
    def test_status_codes(self, test_client, kind, status_code):
        assert test_client.get(f"/raise/{kind}").status_code == status_code

    def test_not_found_message_names_entity_and_id_only(self, test_client):
        response = test_client.get("/raise/not-found")

        assert response.json() == {"detail": "Category not found: 01ABC"}

    def test_missing_tenant_hides_internals(self, test_client):
        response = test_client.get("/raise/no-tenant")

        assert response.json() == {"detail": "Internal server error"}
