"""Tests for system routes and app wiring."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.application import create_app


@pytest.mark.asyncio
async def test_health_reports_catalog_size(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["products"] == 10


@pytest.mark.asyncio
async def test_static_directory_is_served_behind_api_routes(tmp_path):
    (tmp_path / "index.html").write_text("<h1>catalog</h1>", encoding="utf-8")
    app = create_app(static_directory=tmp_path)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        page = await test_client.get("/")
        products = await test_client.get("/pruducts")

    assert page.status_code == 200
    assert "catalog" in page.text
    assert products.status_code == 200
