"""Unit tests for AccessGate path and role rules."""

from unittest.mock import Mock

import pytest
import structlog

from shared_kernel.auth.principal import ANONYMOUS_PRINCIPAL, Principal, Role
from shared_kernel.middleware.access_gate import (
    FORBIDDEN_MESSAGE,
    UNAUTHENTICATED_MESSAGE,
    AccessGate,
)
from shared_kernel.middleware.observability import AccessGateProbe


@pytest.fixture
def mock_probe():
    return Mock(spec=AccessGateProbe)


@pytest.fixture
def gate(context, mock_probe) -> AccessGate:
    return AccessGate(context=context, probe=mock_probe)


@pytest.fixture
def user() -> Principal:
    return Principal(tenant_id="tenant-a", username="alice", role=Role.USER)


@pytest.fixture
def admin() -> Principal:
    return Principal(tenant_id="tenant-root", username="root", role=Role.ADMIN)


class TestErrorPath:
    """The error path is always allowed and never scoped."""

    def test_allows_without_principal(self, gate, context):
        decision = gate.authorize("/error", None)

        assert decision.allowed is True
        assert context.get() is None

    def test_allows_authenticated_principal_without_setting_context(
        self, gate, context, user
    ):
        decision = gate.authorize("/error", user)

        assert decision.allowed is True
        assert context.get() is None


class TestAuthentication:
    """Requests outside /error need an authenticated principal."""

    @pytest.mark.parametrize("path", ["/categories", "/admin/tenants", "/"])
    def test_denies_missing_principal(self, gate, context, path):
        decision = gate.authorize(path, None)

        assert decision.allowed is False
        assert decision.status_code == 401
        assert decision.message == UNAUTHENTICATED_MESSAGE
        assert context.get() is None

    def test_denies_anonymous_principal(self, gate, mock_probe):
        decision = gate.authorize("/contacts", ANONYMOUS_PRINCIPAL)

        assert decision.status_code == 401
        mock_probe.authentication_missing.assert_called_once_with("/contacts")

    def test_denies_unauthenticated_principal(self, gate):
        principal = Principal(
            tenant_id="tenant-a", username="alice", role=Role.USER, authenticated=False
        )

        decision = gate.authorize("/contacts", principal)

        assert decision.status_code == 401


class TestAdminNamespace:
    """The /admin/ namespace requires ADMIN and is never tenant-scoped."""

    def test_denies_user_role(self, gate, context, user, mock_probe):
        decision = gate.authorize("/admin/tenants", user)

        assert decision.allowed is False
        assert decision.status_code == 403
        assert decision.message == FORBIDDEN_MESSAGE
        assert context.get() is None
        mock_probe.admin_access_denied.assert_called_once_with(
            "/admin/tenants", "alice"
        )

    def test_allows_admin_without_setting_context(self, gate, context, admin):
        decision = gate.authorize("/admin/tenants/123", admin)

        assert decision.allowed is True
        assert context.get() is None

    def test_role_parsed_case_insensitively_before_comparison(self, gate):
        principal = Principal(
            tenant_id="tenant-root", username="root", role=Role.parse("admin")
        )

        assert gate.authorize("/admin/tenants", principal).allowed is True

    def test_admin_prefix_requires_trailing_slash(self, gate, context, user):
        decision = gate.authorize("/administrators", user)

        assert decision.allowed is True
        assert context.get() == "tenant-a"


class TestTenantScoping:
    """Ordinary paths bind the principal's tenant."""

    def test_sets_context_for_user(self, gate, context, user, mock_probe):
        decision = gate.authorize("/categories", user)

        assert decision.allowed is True
        assert context.require() == "tenant-a"
        mock_probe.tenant_context_set.assert_called_once_with("tenant-a", "alice")

    def test_admin_on_ordinary_path_is_scoped_to_own_tenant(self, gate, context, admin):
        gate.authorize("/contacts", admin)

        assert context.require() == "tenant-root"

    def test_binds_tenant_into_log_context(self, gate, user):
        gate.authorize("/categories", user)

        assert structlog.contextvars.get_contextvars()["tenant_id"] == "tenant-a"
        gate.finish()
        assert "tenant_id" not in structlog.contextvars.get_contextvars()


class TestFinish:
    """finish() releases the binding unconditionally."""

    def test_clears_context(self, gate, context, user):
        gate.authorize("/categories", user)

        gate.finish()

        assert context.get() is None

    def test_is_safe_without_binding(self, gate, context, mock_probe):
        gate.finish()
        gate.finish()

        assert context.get() is None
        assert mock_probe.tenant_context_cleared.call_count == 2


class TestGuard:
    """guard() pairs authorize with a guaranteed finish."""

    def test_clears_after_normal_exit(self, gate, context, user):
        with gate.guard("/categories", user) as decision:
            assert decision.allowed is True
            assert context.require() == "tenant-a"

        assert context.get() is None

    def test_clears_when_handler_raises(self, gate, context, user):
        with pytest.raises(RuntimeError):
            with gate.guard("/categories", user):
                raise RuntimeError("handler failed")

        assert context.get() is None

    def test_denied_request_does_not_call_finish(self, gate, mock_probe):
        with gate.guard("/categories", None) as decision:
            assert decision.allowed is False

        mock_probe.tenant_context_cleared.assert_not_called()
