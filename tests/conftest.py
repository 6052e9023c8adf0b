from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from motor.motor_asyncio import AsyncIOMotorDatabase

from travestore.db.client import get_db
from travestore.main import app

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]

TEST_DATABASE = "travestore_test"


@pytest_asyncio.fixture
async def db() -> AsyncIterator[AsyncIOMotorDatabase]:
    """Fresh in-memory database per test; nothing leaks between tests."""
    yield AsyncMongoMockClient(tz_aware=True)[TEST_DATABASE]


@pytest_asyncio.fixture
async def client(db: AsyncIOMotorDatabase) -> AsyncIterator[AsyncClient]:
    """HTTP client that uses the test database."""
    app.dependency_overrides[get_db] = lambda: db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()

