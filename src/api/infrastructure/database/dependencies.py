"""Database dependency injection for FastAPI.

Provides the async session factory with proper transaction management and
connection pooling. Sessions are also handed to the ASGI middleware for
principal resolution, which runs outside FastAPI's dependency system.
"""

from __future__ import annotations

import threading
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine
from infrastructure.database.models import Base
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import get_database_settings

# Module-level probe for observability
_probe = DefaultConnectionProbe()

# Module-level engine and sessionmaker (created on first use)
_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def get_engine() -> AsyncEngine:
    """Get the database engine (singleton).

    Creates the engine on first call and caches it. Uses double-check locking
    for thread-safe initialization.

    Returns:
        Configured async engine
    """
    global _engine, _sessionmaker
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                settings = get_database_settings()
                _engine = create_engine(settings)
                _sessionmaker = async_sessionmaker(
                    _engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
                _probe.engine_created(settings.connection_string)
    return _engine


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Get the cached sessionmaker, initializing the engine if needed."""
    get_engine()
    assert _sessionmaker is not None
    return _sessionmaker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide a session for the request (FastAPI dependency).

    The session is configured to NOT auto-commit. Services manage
    transactions explicitly using ``async with session.begin()``.

    Yields:
        AsyncSession for database operations
    """
    async with get_sessionmaker()() as session:
        yield session


async def create_schema() -> None:
    """Create all tables known to the ORM metadata.

    Development convenience enabled by CONTACTS_DB_CREATE_SCHEMA; production
    schemas are managed by Alembic migrations.
    """
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    _probe.schema_created(len(Base.metadata.tables))


async def close_database_connections() -> None:
    """Dispose of the engine and reset the sessionmaker.

    Should be called on application shutdown.
    """
    global _engine, _sessionmaker

    if _engine is not None:
        await _engine.dispose()
        _probe.pool_closed()
        _engine = None
        _sessionmaker = None
