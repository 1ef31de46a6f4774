"""
Sycamore Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: AsyncMock session (no real DB needed)
    ├── member_rows:     three projected member rows
    ├── database:        real Database on a throwaway SQLite file (aiosqlite)
    ├── app:             fresh FastAPI app from create_app()
    └── test_client:     HTTPX AsyncClient talking to `app` over ASGI
"""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.database import Base, Database


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.all.return_value = rows
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


def make_row(first_name, last_name, email, avatar=None):
    """A projected row as returned by `result.all()`."""
    return SimpleNamespace(
        id=uuid4(),
        first_name=first_name,
        last_name=last_name,
        email=email,
        avatar=avatar,
    )


@pytest.fixture
def member_rows():
    return [
        make_row("Ada", "Lovelace", "ada@example.com"),
        make_row("Grace", "Hopper", "grace@example.com"),
        make_row("Alan", "Turing", "alan@example.com", avatar="https://cdn.example.com/a.png"),
    ]


@pytest_asyncio.fixture
async def database(tmp_path):
    """
    A real connection pool on a temporary SQLite file with the schema created.

    Disposed after the test.
    """
    db_settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'members.db'}")
    db = Database(db_settings)
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db
    await db.dispose()


@pytest.fixture
def app():
    from app.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so tests attach a database to
    app.state or override dependencies themselves.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
