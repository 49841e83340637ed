"""
Foody Backend: Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: Mock async session for service unit tests (no DB)
    ├── db_tables:       Creates/drops the tables in a throwaway SQLite file
    ├── db_session:      Real AsyncSession on that file, for seeding and checks
    └── test_client:     HTTPX AsyncClient talking to the ASGI app in-process
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run BEFORE any app import: the engine is built from settings at import time
_test_db_path = os.path.join(tempfile.mkdtemp(prefix="foody_test_"), "foody.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_db_path}"
os.environ["CORS_ORIGINS"] = "*"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalars.return_value.all.return_value = rows
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_dish_data():
    """Column values for one dish row."""
    return {
        "id": 1,
        "name": "Margherita",
        "description": "Tomato, mozzarella, basil",
        "price": 9.5,
        "restaurant_name": "Luigi's",
        "category": "Pizza",
        "calories": 800,
    }


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures (SQLite file via aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_tables():
    """
    Creates the dishes and restaurants tables before the test and drops them after.

    The engine is disposed afterwards so pooled connections never outlive
    the test's event loop.
    """
    import app.models  # noqa: F401  (registers tables on Base.metadata)
    from app.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_tables):
    """A real session on the test database, independent of request sessions."""
    from app.database import async_session_factory

    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
