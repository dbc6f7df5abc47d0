"""Unit tests for CategoryService."""

from unittest.mock import AsyncMock, Mock

import pytest

from contacts.application.observability import CategoryServiceProbe
from contacts.application.services import CategoryService
from contacts.domain.aggregates import Category
from contacts.domain.value_objects import CategoryId, EntityKind
from contacts.ports.repositories import (
    ICategoryContactLinkRepository,
    ICategoryRepository,
    IContactRepository,
)
from shared_kernel.exceptions import NotFoundError, ValidationError
from shared_kernel.middleware.tenant_context import TenantContextNotSetError
from shared_kernel.pagination import PagedResult, PageRequest


@pytest.fixture
def mock_category_repo():
    repo = Mock(spec=ICategoryRepository)
    repo.save = AsyncMock()
    repo.get = AsyncMock(return_value=None)
    repo.search = AsyncMock()
    repo.delete = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_contact_repo():
    repo = Mock(spec=IContactRepository)
    repo.search_in_category = AsyncMock()
    return repo


@pytest.fixture
def mock_link_repo():
    repo = Mock(spec=ICategoryContactLinkRepository)
    repo.unlink_all_for = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def mock_probe():
    return Mock(spec=CategoryServiceProbe)


@pytest.fixture
def service(
    mock_category_repo, mock_contact_repo, mock_link_repo, mock_session, context, mock_probe
):
    context.set("tenant-a")
    return CategoryService(
        category_repository=mock_category_repo,
        contact_repository=mock_contact_repo,
        link_repository=mock_link_repo,
        session=mock_session,
        context=context,
        probe=mock_probe,
    )


@pytest.fixture
def work() -> Category:
    return Category.create(tenant_id="tenant-a", category_name="Work")


class TestTenantScoping:
    """Every operation runs against the bound tenant."""

    @pytest.mark.asyncio
    async def test_requires_tenant_context(self, service, context):
        context.clear()

        with pytest.raises(TenantContextNotSetError):
            await service.create_category("Work")

    @pytest.mark.asyncio
    async def test_create_uses_current_tenant(self, service, mock_category_repo):
        category = await service.create_category("Work")

        assert category.tenant_id == "tenant-a"
        mock_category_repo.save.assert_awaited_once_with(category)

    @pytest.mark.asyncio
    async def test_list_queries_current_tenant(self, service, mock_category_repo):
        page_request = PageRequest()
        mock_category_repo.search.return_value = PagedResult(
            items=[], total=0, page=0, page_size=20
        )

        await service.list_categories("wo", page_request)

        mock_category_repo.search.assert_awaited_once_with("tenant-a", "wo", page_request)

    @pytest.mark.asyncio
    async def test_lookup_passes_current_tenant(self, service, mock_category_repo, work):
        mock_category_repo.get.return_value = work

        await service.get_category(work.id)

        mock_category_repo.get.assert_awaited_once_with("tenant-a", work.id)


class TestCreateCategory:
    """Tests for CategoryService.create_category."""

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, service, mock_category_repo):
        with pytest.raises(ValidationError):
            await service.create_category("   ")

        mock_category_repo.save.assert_not_called()


class TestGetCategory:
    """Tests for CategoryService.get_category."""

    @pytest.mark.asyncio
    async def test_not_found_names_entity_and_id(self, service, mock_probe):
        with pytest.raises(NotFoundError, match="^Category not found: 01X$"):
            await service.get_category(CategoryId(value="01X"))

        mock_probe.category_not_found.assert_called_once_with("01X")


class TestUpdateCategory:
    """Tests for CategoryService.update_category."""

    @pytest.mark.asyncio
    async def test_renames_and_saves(self, service, mock_category_repo, work):
        mock_category_repo.get.return_value = work

        updated = await service.update_category(work.id, "Office")

        assert updated.category_name == "Office"
        assert updated.tenant_id == "tenant-a"
        mock_category_repo.save.assert_awaited_once_with(work)

    @pytest.mark.asyncio
    async def test_unknown_category_is_not_saved(self, service, mock_category_repo):
        with pytest.raises(NotFoundError):
            await service.update_category(CategoryId(value="01X"), "Office")

        mock_category_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_omitted_name_keeps_category_unchanged(
        self, service, mock_category_repo, work
    ):
        mock_category_repo.get.return_value = work

        updated = await service.update_category(work.id, None)

        assert updated.category_name == "Work"
        mock_category_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, service, mock_category_repo, work):
        mock_category_repo.get.return_value = work

        with pytest.raises(ValidationError):
            await service.update_category(work.id, "  ")

        mock_category_repo.save.assert_not_called()


class TestDeleteCategory:
    """Tests for CategoryService.delete_category."""

    @pytest.mark.asyncio
    async def test_removes_links_then_category(
        self, service, mock_category_repo, mock_link_repo, mock_probe, work
    ):
        mock_category_repo.get.return_value = work
        mock_link_repo.unlink_all_for.return_value = 3

        await service.delete_category(work.id)

        mock_link_repo.unlink_all_for.assert_awaited_once_with(
            work.id.value, EntityKind.CATEGORY
        )
        mock_category_repo.delete.assert_awaited_once_with(work)
        mock_probe.category_deleted.assert_called_once_with(work.id.value, unlinked=3)

    @pytest.mark.asyncio
    async def test_unknown_category_touches_no_links(self, service, mock_link_repo):
        with pytest.raises(NotFoundError):
            await service.delete_category(CategoryId(value="01X"))

        mock_link_repo.unlink_all_for.assert_not_called()


class TestListContactsOf:
    """Tests for CategoryService.list_contacts_of."""

    @pytest.mark.asyncio
    async def test_checks_ownership_first(self, service, mock_contact_repo):
        with pytest.raises(NotFoundError):
            await service.list_contacts_of(CategoryId(value="01X"), None, None, PageRequest())

        mock_contact_repo.search_in_category.assert_not_called()

    @pytest.mark.asyncio
    async def test_delegates_filters(
        self, service, mock_category_repo, mock_contact_repo, work
    ):
        page_request = PageRequest(page_size=5)
        mock_category_repo.get.return_value = work
        expected = PagedResult(items=[], total=0, page=0, page_size=5)
        mock_contact_repo.search_in_category.return_value = expected

        result = await service.list_contacts_of(work.id, "ali", "555", page_request)

        assert result is expected
        mock_contact_repo.search_in_category.assert_awaited_once_with(
            "tenant-a", work.id, "ali", "555", page_request
        )
