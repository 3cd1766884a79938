"""
Shared test fixtures for the Wayfarer API test suite.

Provides:
- a fresh in-memory SQLite store per test (aiosqlite, FKs enforced)
- an async session and a session factory for read-back in a clean session
- async FastAPI test client bound to the same store (no lifespan needed)
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker

# Ensure test env vars before any app imports
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SENTRY_DSN", "")


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    """In-memory SQLite engine with the full schema. Disposed after the test."""
    from services.api.db.engine import create_engine, create_schema

    eng = create_engine("sqlite+aiosqlite:///:memory:")
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------


@pytest.fixture
async def app(engine, session_factory):
    """The FastAPI app with its session factory pointed at the test store."""
    from services.api.config import settings
    from services.api.main import app as _app

    _app.state.settings = settings
    _app.state.db_engine = engine
    _app.state.db_session_factory = session_factory
    yield _app
    _app.state.db_session_factory = None


@pytest.fixture
async def client(app):
    """Async HTTP client bound to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
