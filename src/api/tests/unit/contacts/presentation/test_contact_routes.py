"""Unit tests for contact routes."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from contacts.application.services import ContactService
from contacts.domain.aggregates import Category, Contact
from contacts.domain.value_objects import CategoryId, ContactId
from infrastructure.web import get_principal, register_exception_handlers
from shared_kernel.auth.principal import Principal, Role
from shared_kernel.exceptions import NotFoundError
from shared_kernel.middleware.tenant_context import TenantContextNotSetError
from shared_kernel.pagination import PagedResult, PageRequest

USER_PRINCIPAL = Principal(tenant_id="tenant-a", username="alice", role=Role.USER)


@pytest.fixture
def mock_contact_service() -> AsyncMock:
    """Mock ContactService for testing."""
    return AsyncMock(spec=ContactService)


@pytest.fixture
def test_client(mock_contact_service: AsyncMock) -> TestClient:
    """Create TestClient with mocked dependencies."""
    from contacts.dependencies import get_contact_service
    from contacts.presentation import router

    app = FastAPI()
    register_exception_handlers(app)
    app.dependency_overrides[get_contact_service] = lambda: mock_contact_service
    app.dependency_overrides[get_principal] = lambda: USER_PRINCIPAL
    app.include_router(router)

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def alice() -> Contact:
    return Contact.create(tenant_id="tenant-a", contact_name="Alice", phone="555-0100")


class TestListContacts:
    """Tests for GET /contacts."""

    def test_maps_filters(self, test_client, mock_contact_service, alice):
        mock_contact_service.list_contacts.return_value = PagedResult(
            items=[alice], total=1, page=0, page_size=20
        )

        response = test_client.get(
            "/contacts",
            params={"contactName": "ali", "phone": "0100", "categoryName": "wor"},
        )

        assert response.status_code == status.HTTP_200_OK
        item = response.json()["items"][0]
        assert item["contactName"] == "Alice"
        assert item["phone"] == "555-0100"
        assert item["categoryIds"] == []
        mock_contact_service.list_contacts.assert_called_once_with(
            name_filter="ali",
            phone_filter="0100",
            category_name_filter="wor",
            page_request=PageRequest(),
        )

    def test_page_size_out_of_range_is_bad_request(self, test_client, mock_contact_service):
        response = test_client.get("/contacts", params={"pageSize": 0})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        mock_contact_service.list_contacts.assert_not_called()

    def test_missing_tenant_context_is_internal_error(
        self, test_client, mock_contact_service
    ):
        mock_contact_service.list_contacts.side_effect = TenantContextNotSetError()

        response = test_client.get("/contacts")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Internal server error"}


class TestContactCrud:
    """Tests for create, read, update and delete routes."""

    def test_create(self, test_client, mock_contact_service, alice):
        mock_contact_service.create_contact.return_value = alice

        response = test_client.post(
            "/contacts", json={"contactName": "Alice", "phone": "555-0100"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == alice.id.value
        mock_contact_service.create_contact.assert_called_once_with("Alice", "555-0100")

    def test_create_missing_phone_is_unprocessable(self, test_client, mock_contact_service):
        response = test_client.post("/contacts", json={"contactName": "Alice"})

        assert response.status_code == 422
        mock_contact_service.create_contact.assert_not_called()

    def test_update(self, test_client, mock_contact_service, alice):
        mock_contact_service.update_contact.return_value = alice

        response = test_client.put(
            f"/contacts/{alice.id.value}",
            json={"contactName": "Alice", "phone": "555-0100"},
        )

        assert response.status_code == status.HTTP_200_OK
        mock_contact_service.update_contact.assert_called_once_with(
            alice.id, contact_name="Alice", phone="555-0100"
        )

    def test_get_unknown_is_not_found(self, test_client, mock_contact_service):
        mock_contact_service.get_contact.side_effect = NotFoundError("Contact", "01X")

        response = test_client.get("/contacts/01X")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Contact not found: 01X"}

    def test_delete(self, test_client, mock_contact_service):
        response = test_client.delete("/contacts/01X")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        mock_contact_service.delete_contact.assert_called_once_with(
            ContactId(value="01X")
        )


class TestCategoryMembership:
    """Tests for the /contacts/{id}/categories routes."""

    def test_assign_returns_contact_with_sorted_category_ids(
        self, test_client, mock_contact_service, alice
    ):
        alice.category_ids = frozenset({"01B", "01A"})
        mock_contact_service.assign_category.return_value = alice

        response = test_client.put(f"/contacts/{alice.id.value}/categories/01B")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["categoryIds"] == ["01A", "01B"]
        mock_contact_service.assign_category.assert_called_once_with(
            alice.id, CategoryId(value="01B")
        )

    def test_assign_unknown_category_is_not_found(self, test_client, mock_contact_service):
        mock_contact_service.assign_category.side_effect = NotFoundError(
            "Category", "01OTHER"
        )

        response = test_client.put("/contacts/01C/categories/01OTHER")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remove(self, test_client, mock_contact_service):
        response = test_client.delete("/contacts/01C/categories/01A")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        mock_contact_service.remove_category.assert_called_once_with(
            ContactId(value="01C"), CategoryId(value="01A")
        )

    def test_list_categories_of_contact(self, test_client, mock_contact_service):
        work = Category.create(tenant_id="tenant-a", category_name="Work")
        mock_contact_service.list_categories_of.return_value = PagedResult(
            items=[work], total=1, page=0, page_size=20
        )

        response = test_client.get(
            "/contacts/01C/categories", params={"categoryName": "wo"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["items"][0]["categoryName"] == "Work"
        mock_contact_service.list_categories_of.assert_called_once_with(
            ContactId(value="01C"),
            name_filter="wo",
            page_request=PageRequest(),
        )
