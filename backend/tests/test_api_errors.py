"""Unexpected database failures surface as opaque 500s on the detail endpoints."""
import pytest
from httpx import AsyncClient, ASGITransport

from yatra.auth import get_current_user
from yatra.database import get_db
from yatra.main import app
from yatra.models import User


class BrokenSession:
    def query(self, *args, **kwargs):
        raise RuntimeError("connection reset by peer")

    def rollback(self):
        pass


@pytest.fixture
async def broken_client():
    def _broken_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = _broken_db
    app.dependency_overrides[get_current_user] = lambda: User(id="user-1")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.mark.parametrize("path, detail", [
    ("/api/flights/f-1", "Failed to fetch flight"),
    ("/api/hotels/h-1", "Failed to fetch hotel"),
    ("/api/trains/t-1", "Failed to fetch train"),
    ("/api/buses/b-1", "Failed to fetch bus"),
    ("/api/travel-guide/winter-in-goa", "Failed to fetch article"),
    ("/api/checkout/draft-1", "Failed to fetch checkout"),
])
async def test_detail_endpoints_hide_database_errors(broken_client, caplog, path, detail):
    response = await broken_client.get(path)

    assert response.status_code == 500
    assert response.json() == {"detail": detail}
    assert "connection reset" not in response.text
    assert any(record.exc_info for record in caplog.records)
