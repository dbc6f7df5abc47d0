"""Unit tests for Category and Contact aggregates."""

import pytest

from contacts.domain.aggregates import Category, Contact
from shared_kernel.exceptions import ValidationError


class TestCategory:
    """Tests for the Category aggregate."""

    def test_create_assigns_tenant_and_id(self):
        category = Category.create(tenant_id="tenant-a", category_name=" Work ")

        assert category.tenant_id == "tenant-a"
        assert category.category_name == "Work"
        assert len(category.id.value) == 26
        assert category.created_at is not None

    @pytest.mark.parametrize("blank", ["", "  ", None])
    def test_create_rejects_blank_name(self, blank):
        with pytest.raises(ValidationError):
            Category.create(tenant_id="tenant-a", category_name=blank)

    def test_rename_keeps_tenant(self):
        category = Category.create(tenant_id="tenant-a", category_name="Work")

        category.rename("Office")

        assert category.category_name == "Office"
        assert category.tenant_id == "tenant-a"

    def test_rename_rejects_blank(self):
        category = Category.create(tenant_id="tenant-a", category_name="Work")

        with pytest.raises(ValidationError):
            category.rename("")
        assert category.category_name == "Work"


class TestContact:
    """Tests for the Contact aggregate."""

    def test_create_starts_without_categories(self):
        contact = Contact.create(tenant_id="tenant-a", contact_name="Alice", phone="555-0100")

        assert contact.category_ids == frozenset()
        assert contact.phone == "555-0100"

    @pytest.mark.parametrize("name, phone", [("", "555"), ("Alice", " ")])
    def test_create_rejects_blank_fields(self, name, phone):
        with pytest.raises(ValidationError):
            Contact.create(tenant_id="tenant-a", contact_name=name, phone=phone)

    def test_update_is_all_or_nothing(self):
        contact = Contact.create(tenant_id="tenant-a", contact_name="Alice", phone="555")

        with pytest.raises(ValidationError):
            contact.update(contact_name="Alicia", phone="")

        assert contact.contact_name == "Alice"
        assert contact.phone == "555"
