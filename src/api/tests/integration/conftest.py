"""Integration test fixtures.

Tests run against an in-memory SQLite database through aiosqlite, so no
external services are needed. Each test gets a fresh database.
"""

import base64

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import contacts.infrastructure.models  # noqa: F401 - registers tables
import iam.infrastructure.models  # noqa: F401 - registers tables
from infrastructure.database.models import Base
from infrastructure.settings import (
    get_database_settings,
    get_iam_settings,
    get_settings,
)

ADMIN_USERNAME = "root"
ADMIN_PASSWORD = "root-password"


def basic_auth(username: str, password: str) -> dict[str, str]:
    """Build an HTTP Basic Authorization header."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


def _clear_settings_caches() -> None:
    get_settings.cache_clear()
    get_database_settings.cache_clear()
    get_iam_settings.cache_clear()


@pytest_asyncio.fixture
async def engine():
    """Async engine over a private in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """Session for repository-level tests; nothing is committed."""
    sessionmaker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    async with sessionmaker() as session:
        yield session


@pytest.fixture
def database_url() -> str:
    """Database the application under test connects to."""
    return "sqlite+aiosqlite://"


@pytest.fixture
def app_env(monkeypatch, database_url):
    """Point the application at a fresh database with an admin."""
    monkeypatch.setenv("CONTACTS_DB_URL", database_url)
    monkeypatch.setenv("CONTACTS_DB_CREATE_SCHEMA", "true")
    monkeypatch.setenv("CONTACTS_IAM_BOOTSTRAP_ADMIN_USERNAME", ADMIN_USERNAME)
    monkeypatch.setenv("CONTACTS_IAM_BOOTSTRAP_ADMIN_PASSWORD", ADMIN_PASSWORD)
    _clear_settings_caches()
    yield
    _clear_settings_caches()


@pytest_asyncio.fixture
async def async_client(app_env):
    """Create async HTTP client for testing with lifespan support.

    Uses LifespanManager so startup creates the schema and the admin
    tenant, and shutdown disposes the engine (dropping the database).
    """
    from main import app

    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return basic_auth(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def create_tenant(async_client, admin_headers):
    """Factory creating a USER tenant and returning its auth headers."""

    async def _create(username: str, password: str = "secret") -> dict[str, str]:
        response = await async_client.post(
            "/admin/tenants",
            json={"name": f"{username} org", "username": username, "password": password},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return basic_auth(username, password)

    return _create


@pytest.fixture
def auth_headers():
    """Expose the Basic header builder to tests."""
    return basic_auth
