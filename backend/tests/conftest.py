"""
Blog Backend: Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sample_post_data: Field values for a stored post
    ├── database: posts table created in a temporary SQLite file, dropped afterwards
    └── test_client: HTTPX AsyncClient wired to the FastAPI app over ASGI
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any blog_backend import: settings and the engine are
# built at import time.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="blog_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/blog_test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_BASE_URL"] = ""


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_post(mock_db_session):
            mock_db_session.execute.return_value.scalar_one.return_value = post
            result = await post_service.get_post(mock_db_session, 1)
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
def sample_post_data():
    """Field values matching the Post model."""
    return {
        "id": 1,
        "title": "Hello world",
        "content": "The first post on this blog.",
        "created_at": datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    }


@pytest_asyncio.fixture
async def database():
    """
    Creates the posts table in the temporary SQLite database for one test.

    The engine is disposed afterwards so no pooled connection outlives the
    test's event loop.
    """
    from blog_backend.database import Base, engine
    from blog_backend.models.post import Post  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from blog_backend.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
