import asyncio
import logging

from fastapi.testclient import TestClient
from starlette.requests import Request

from main import app
from shortly.api.v1.links import shorten_url
from shortly.config import settings
from shortly.dependencies import get_identifier_generator
from shortly.exceptions import EncodingError
from shortly.services.identifier_strategies import IdentifierStrategy
from shortly.services.shortening_service import ShorteningService


class BrokenGenerator(IdentifierStrategy):
    def generate(self, seed, instant):
        raise EncodingError("failed to encode hash")


class TestShortenEndpoint:
    """Test POST /api/v1/shorten"""

    def test_create_short_url(self, client: TestClient):
        response = client.post("/api/v1/shorten", json={"original_url": "http://google.co.uk"})
        assert response.status_code == 200

        data = response.json()
        assert data["id"]
        assert data["original_url"] == "http://google.co.uk"
        assert data["short_url"] == f"http://testserver/{data['id']}"

    def test_returns_existing_short_url(self, client: TestClient):
        response = client.post("/api/v1/shorten", json={"original_url": "http://google.com"})
        assert response.status_code == 200
        assert response.json() == {
            "id": "123456",
            "original_url": "http://google.com",
            "short_url": "http://short.ly/123456",
        }

    def test_same_url_twice_same_short_url(self, client: TestClient):
        first = client.post("/api/v1/shorten", json={"original_url": "https://www.python.org/"})
        second = client.post("/api/v1/shorten", json={"original_url": "https://www.python.org/"})

        assert first.json()["id"] == second.json()["id"]
        assert first.json()["short_url"] == second.json()["short_url"]

    def test_wrong_method_not_allowed(self, client: TestClient):
        response = client.get("/api/v1/shorten")
        assert response.status_code == 405

    def test_malformed_json_returns_500(self, client: TestClient):
        response = client.post(
            "/api/v1/shorten",
            content=b'{"text":}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500

    def test_non_object_json_returns_500(self, client: TestClient):
        response = client.post("/api/v1/shorten", json=["http://google.com"])
        assert response.status_code == 500

    def test_empty_fields_are_omitted(self, client: TestClient):
        """A body without original_url is not validated; the empty URL is left out of the response"""
        response = client.post("/api/v1/shorten", json={})
        assert response.status_code == 200

        data = response.json()
        assert "original_url" not in data
        assert data["short_url"].endswith(f"/{data['id']}")

    def test_generation_failure_returns_500(self, client: TestClient):
        app.dependency_overrides[get_identifier_generator] = lambda: BrokenGenerator()

        response = client.post("/api/v1/shorten", json={"original_url": "http://google.co.uk"})
        assert response.status_code == 500

    def test_public_base_url_overrides_request_host(self, client: TestClient, monkeypatch):
        monkeypatch.setattr(settings, "public_base_url", "https://sho.rt")

        response = client.post("/api/v1/shorten", json={"original_url": "https://github.com/"})
        data = response.json()
        assert data["short_url"] == f"https://sho.rt/{data['id']}"

    def test_unreadable_body_returns_400(self, seeded_store, generator):
        async def receive():
            return {"type": "http.disconnect"}

        request = Request(
            {
                "type": "http",
                "method": "POST",
                "path": "/api/v1/shorten",
                "headers": [],
                "query_string": b"",
                "scheme": "http",
                "server": ("short.ly", 80),
            },
            receive,
        )
        service = ShorteningService(seeded_store, generator)

        response = asyncio.run(shorten_url(request, shortening_service=service))
        assert response.status_code == 400


class TestRedirectEndpoint:
    """Test GET /{id}"""

    def test_redirect_to_original_url(self, client: TestClient):
        response = client.get("/123456", follow_redirects=False)
        assert response.status_code == 301
        assert response.headers["location"] == "http://google.com"

    def test_wrong_method_not_allowed(self, client: TestClient):
        response = client.post("/123456")
        assert response.status_code == 405

    def test_missing_id_returns_400(self, client: TestClient):
        response = client.get("/", follow_redirects=False)
        assert response.status_code == 400

    def test_unknown_id_returns_204(self, client: TestClient):
        response = client.get("/abcdef", follow_redirects=False)
        assert response.status_code == 204
        assert response.content == b""

    def test_shorten_then_redirect(self, client: TestClient):
        create_response = client.post("/api/v1/shorten", json={"original_url": "https://www.github.com/"})
        link_id = create_response.json()["id"]

        response = client.get(f"/{link_id}", follow_redirects=False)
        assert response.status_code == 301
        assert response.headers["location"] == "https://www.github.com/"


class TestHealthEndpoint:

    def test_health_check(self, client: TestClient):
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["storage_backend"] == "InMemoryLinkStore"
        assert data["links"] == 1


class TestRequestLogging:

    def test_request_line_is_logged(self, client: TestClient, caplog):
        with caplog.at_level(logging.INFO, logger="shortly"):
            client.get("/123456", follow_redirects=False)

        assert "[GET] /123456" in caplog.messages
