"""
AsyncEngine factory, schema bootstrap and standalone session context manager.

NullPool on Postgres because PgBouncer owns connection pooling. SQLite
(local runs and the test suite) gets a StaticPool so an in-memory database
survives across sessions, plus PRAGMA foreign_keys so cascades and FK
violations behave the same as on Postgres.
"""

from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from services.api.config import settings
from services.api.db.models import Base


def _async_url(url: str) -> str:
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine for ``database_url`` (defaults to settings).

    Postgres URLs are rewritten to the asyncpg driver, SQLite URLs to aiosqlite.
    """
    url = _async_url(database_url or settings.database_url)
    echo = settings.debug and settings.environment == "development"

    if url.startswith("sqlite"):
        engine = create_async_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=echo,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(url, poolclass=NullPool, echo=echo)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table and enum the models declare (no-op for existing ones)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def standalone_session(database_url: Optional[str] = None):
    """
    For scripts that run outside FastAPI (seeding, maintenance).
    Handles engine lifecycle to prevent connection leaks with NullPool.
    """
    engine = create_engine(database_url)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    try:
        async with factory() as session:
            yield session
    finally:
        await engine.dispose()
