"""Pytest configuration and fixtures for the catalog service."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.services.product_store import ProductStore, get_product_store


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def store():
    """Give every test its own seeded store."""
    from src.main import app

    fresh = ProductStore.with_default_catalog()
    app.dependency_overrides[get_product_store] = lambda: fresh
    yield fresh
    app.dependency_overrides.pop(get_product_store, None)


@pytest_asyncio.fixture()
async def client(store):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
