"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, Mock

import pytest
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared_kernel.middleware.tenant_context import TenantContext, tenant_context


@pytest.fixture
def mock_session():
    """Mock AsyncSession whose begin() works as an async context manager."""
    session = Mock(spec=AsyncSession)

    ctx_manager = AsyncMock()
    ctx_manager.__aenter__ = AsyncMock(return_value=None)
    ctx_manager.__aexit__ = AsyncMock(return_value=None)

    session.begin = Mock(return_value=ctx_manager)
    return session


@pytest.fixture
def context() -> TenantContext:
    """Private tenant context, isolated from the process-wide accessor."""
    return TenantContext(name="test_tenant_id")


@pytest.fixture(autouse=True)
def clear_request_tenant():
    """Ensure no test leaks a tenant binding into the next."""
    yield
    tenant_context.clear()
    structlog.contextvars.clear_contextvars()
