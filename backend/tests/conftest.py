"""
Hotel Reservations Backend — Test Configuration (conftest.py)
===============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── make_room / make_reservation: ORM row builders (no database)
    ├── database: Real SQLite schema, created and dropped per test
    └── test_client: HTTPX AsyncClient bound to the app over ASGITransport
"""

import os
import tempfile
from datetime import date
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any hotel_api import
# Why: The settings singleton and the engine are built at import time
_TEST_DB_DIR = tempfile.mkdtemp(prefix="hotel_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENFORCE_RESERVATION_DATE_ORDER"] = "true"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from hotel_api.models import Reservation, Room  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Unit-Test Fixtures (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_room(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = room
            result = await room_service.get_room(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def make_room():
    """Builds transient Room rows; only the id matters to the resolver."""
    def _make(room_id: int, **fields) -> Room:
        return Room(id=room_id, **fields)
    return _make


@pytest.fixture
def make_reservation():
    """Builds transient Reservation rows from ISO date strings (or None)."""
    def _make(
        reservation_id: int,
        room_id: int,
        check_in: Optional[str],
        check_out: Optional[str],
    ) -> Reservation:
        return Reservation(
            id=reservation_id,
            id_room=room_id,
            check_in_date=date.fromisoformat(check_in) if check_in else None,
            check_out_date=date.fromisoformat(check_out) if check_out else None,
        )
    return _make


# ══════════════════════════════════════════════════════════════════════════
# Integration Fixtures (SQLite via aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """
    Creates the schema in the throwaway SQLite file and drops it afterwards.

    Disposing the engine at the end releases every connection opened on
    this test's event loop.
    """
    from hotel_api.database import Base, engine

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
    from hotel_api.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
