"""Unit tests for TenantBootstrapService."""

from unittest.mock import AsyncMock, Mock

import pytest

from iam.application.security import verify_password
from iam.application.services import TenantBootstrapService
from iam.domain.aggregates import Tenant
from iam.domain.value_objects import Role
from iam.ports.repositories import ITenantRepository
from infrastructure.observability.startup_probe import StartupProbe


@pytest.fixture
def mock_tenant_repo():
    repo = Mock(spec=ITenantRepository)
    repo.get_by_username = AsyncMock(return_value=None)
    repo.save = AsyncMock()
    return repo


@pytest.fixture
def mock_probe():
    return Mock(spec=StartupProbe)


@pytest.fixture
def bootstrap_service(mock_tenant_repo, mock_session, mock_probe):
    return TenantBootstrapService(
        tenant_repository=mock_tenant_repo,
        session=mock_session,
        probe=mock_probe,
    )


class TestEnsureAdminTenant:
    """Tests for TenantBootstrapService.ensure_admin_tenant()."""

    @pytest.mark.asyncio
    async def test_creates_admin_when_missing(
        self, bootstrap_service, mock_tenant_repo, mock_probe
    ):
        tenant = await bootstrap_service.ensure_admin_tenant(
            username="root", password="changeme", name="Ops"
        )

        assert tenant.role is Role.ADMIN
        assert tenant.name == "Ops"
        assert verify_password("changeme", tenant.password_hash)
        mock_tenant_repo.save.assert_awaited_once_with(tenant)
        mock_probe.admin_tenant_bootstrapped.assert_called_once_with(
            tenant_id=tenant.id.value, username="root"
        )

    @pytest.mark.asyncio
    async def test_returns_existing_tenant_unchanged(
        self, bootstrap_service, mock_tenant_repo, mock_probe
    ):
        existing = Tenant.create(name="Root", username="root", password_hash="h")
        mock_tenant_repo.get_by_username.return_value = existing

        tenant = await bootstrap_service.ensure_admin_tenant(
            username="root", password="changeme"
        )

        assert tenant is existing
        mock_tenant_repo.save.assert_not_called()
        mock_probe.admin_tenant_already_exists.assert_called_once_with(
            tenant_id=existing.id.value, username="root"
        )
