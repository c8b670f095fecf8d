"""Tests for destinations, travel guide articles and public assets."""
from datetime import datetime

import pytest

from yatra.config import Settings
from yatra.main import app
from yatra.models import TravelGuideArticle
from yatra.services.object_storage import ObjectStorageService, get_object_storage


class TestDestinationsAPI:
    async def test_listing_hides_airports_and_orders_by_popularity(self, client, places):
        response = await client.get("/api/destinations")

        assert response.status_code == 200
        names = [d["name"] for d in response.json()]
        assert names == ["Mumbai", "New Delhi", "Goa"]

    async def test_search_matches_name_city_or_state(self, client, places):
        by_state = await client.get("/api/destinations/search", params={"q": "maharash"})
        by_city = await client.get("/api/destinations/search", params={"q": "panaji"})

        assert [d["name"] for d in by_state.json()] == ["Mumbai"]
        assert [d["name"] for d in by_city.json()] == ["Goa"]

    async def test_search_without_query_is_400(self, client, db_session):
        missing = await client.get("/api/destinations/search")
        blank = await client.get("/api/destinations/search", params={"q": "   "})

        assert missing.status_code == 400
        assert missing.json()["detail"] == "Query parameter 'q' is required"
        assert blank.status_code == 400


class TestTravelGuideAPI:
    def _article(self, db_session, slug, published=True, published_at=None):
        article = TravelGuideArticle(
            title=slug.replace("-", " ").title(),
            content="Long read",
            slug=slug,
            author_id="user-1",
            published=published,
            published_at=published_at,
        )
        db_session.add(article)
        db_session.commit()
        return article

    async def test_lists_published_newest_first(self, client, db_session, user):
        self._article(db_session, "monsoon-in-kerala", published_at=datetime(2026, 6, 1))
        self._article(db_session, "winter-in-goa", published_at=datetime(2026, 11, 1))
        self._article(db_session, "draft-post", published=False)

        response = await client.get("/api/travel-guide")

        assert response.status_code == 200
        assert [a["slug"] for a in response.json()] == ["winter-in-goa", "monsoon-in-kerala"]

    async def test_get_by_slug(self, client, db_session, user):
        self._article(db_session, "winter-in-goa", published_at=datetime(2026, 11, 1))

        response = await client.get("/api/travel-guide/winter-in-goa")

        assert response.status_code == 200
        assert response.json()["authorId"] == "user-1"

    async def test_unpublished_slug_is_404(self, client, db_session, user):
        self._article(db_session, "draft-post", published=False)

        response = await client.get("/api/travel-guide/draft-post")

        assert response.status_code == 404
        assert response.json()["detail"] == "Article not found"


class TestPublicObjects:
    @pytest.fixture
    def storage(self, tmp_path):
        public = tmp_path / "public"
        (public / "images").mkdir(parents=True)
        (public / "images" / "goa.jpg").write_bytes(b"jpeg-bytes")
        (tmp_path / "secret.txt").write_text("nope")

        service = ObjectStorageService(search_paths=[str(public)])
        app.dependency_overrides[get_object_storage] = lambda: service
        yield service
        app.dependency_overrides.pop(get_object_storage, None)

    async def test_serves_file(self, client, storage):
        response = await client.get("/public-objects/images/goa.jpg")

        assert response.status_code == 200
        assert response.content == b"jpeg-bytes"

    async def test_missing_file_is_404(self, client, storage):
        response = await client.get("/public-objects/images/kerala.jpg")

        assert response.status_code == 404
        assert response.json()["detail"] == "File not found"

    def test_paths_outside_root_are_refused(self, storage):
        assert storage.search_public_object("../secret.txt") is None
        assert storage.search_public_object("images/goa.jpg").name == "goa.jpg"

    def test_first_search_path_wins(self, tmp_path):
        first, second = tmp_path / "a", tmp_path / "b"
        first.mkdir()
        second.mkdir()
        (first / "logo.png").write_bytes(b"1")
        (second / "logo.png").write_bytes(b"2")

        found = ObjectStorageService(search_paths=[str(first), str(second)]).search_public_object("logo.png")

        assert found.read_bytes() == b"1"


class TestSettings:
    def test_prod_rejects_sqlite(self):
        with pytest.raises(ValueError):
            Settings(env="prod", database_url="sqlite:///./x.db", auth_secret_key="real-secret")

    def test_prod_rejects_default_secret(self):
        with pytest.raises(ValueError):
            Settings(env="prod", database_url="postgresql://db/yatra", auth_secret_key="dev-secret-change-me")

    def test_prod_accepts_real_config(self):
        settings = Settings(env="prod", database_url="postgresql://db/yatra", auth_secret_key="real-secret")
        assert settings.tax_rate == 0.10
