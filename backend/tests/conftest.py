"""
Quotes API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.

Fixtures:
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── sample_quote_data: field values for a stored quote
    ├── auth_headers: a valid api-password header
    └── test_client: HTTPX AsyncClient on the FastAPI app, backed by a fresh
                     SQLite file per test
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Settings are read once at import; configure the environment before any
# quotes_api module is imported.
_TEST_DIR = tempfile.mkdtemp(prefix="quotes_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["API_PASSWORD"] = "test-password"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

TEST_PASSWORD = "test-password"


@pytest.fixture
def mock_db_session():
    """
    Mock async database session.

    Usage:
        async def test_get_quote(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = quote
            result = await quote_service.get_quote(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_quote_data():
    return {
        "id": 7,
        "text": "Simplicity is prerequisite for reliability.",
        "author": "Edsger W. Dijkstra",
    }


@pytest.fixture
def auth_headers():
    return {"api-password": TEST_PASSWORD}


@pytest_asyncio.fixture
async def reset_database():
    """Drop and recreate the quotes table; dispose the engine afterwards."""
    from quotes_api.database import Base, engine
    from quotes_api.models.quote import Quote  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(reset_database):
    """
    Async HTTP client talking to the app through ASGITransport.

    The app lifespan is not run; reset_database provides the schema.
    """
    from quotes_api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
