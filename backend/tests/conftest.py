"""
Pytest configuration and fixtures for ChipCalc tests.

Provides shared fixtures for testing async FastAPI endpoints and
MongoDB interactions using mongomock-motor (no real MongoDB required).
"""

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from chipcalc.models.chip_set import Denomination


@pytest.fixture
def anyio_backend():
    """Specify anyio backend for async tests."""
    return "asyncio"


@pytest_asyncio.fixture
async def test_db():
    """In-memory MongoDB mock database for unit tests.

    The database is ephemeral -- it disappears after each test.

    Yields:
        An AsyncIOMotorDatabase-compatible mock database instance.
    """
    client = AsyncMongoMockClient()
    db = client["chipcalc_test"]
    yield db
    client.close()


@pytest_asyncio.fixture
async def client():
    """Async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient: HTTPX async client with the FastAPI app.
    """
    from httpx import ASGITransport, AsyncClient
    from chipcalc.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def standard_denominations() -> list[Denomination]:
    """A five-value home-game set: 5x50, 10x50, 25x40, 50x30, 100x20."""
    return [
        Denomination(value=5, quantity=50, color="#FFFFFF", name="White"),
        Denomination(value=10, quantity=50, color="#EF4444", name="Red"),
        Denomination(value=25, quantity=40, color="#22C55E", name="Green"),
        Denomination(value=50, quantity=30, color="#3B82F6", name="Blue"),
        Denomination(value=100, quantity=20, color="#1F2937", name="Black"),
    ]
