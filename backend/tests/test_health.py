"""
Tests for health check endpoints.
"""
from yatra import __version__


async def test_health_endpoint_returns_ok(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "healthy"
    assert data["version"] == __version__


async def test_health_returns_json(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
