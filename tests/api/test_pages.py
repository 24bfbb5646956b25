"""
API tests for server-rendered pages.
"""

import httpx
import pytest

from tests._helpers.fakes import FakeTransport

PRIMED_GREETING = (
    '<script>window.__preCachedResponses=window.__preCachedResponses||{},'
    'window.__preCachedResponses["/api/greeting"]='
    '{"statusCode":200,"body":"{\\"message\\":\\"Hello from a fake\\"}"};</script>'
)


class TestIndexPage:
    def test_index_primes_greeting(self, client, fake_transport):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert PRIMED_GREETING in response.text
        assert fake_transport.calls == ["http://testserver/api/greeting"]

    def test_index_renders_without_cache_when_fetch_fails(self, app, client):
        from primecache.infra.config.dependencies import get_http_transport

        failing = FakeTransport(error=httpx.ConnectError("Connection refused"))
        app.dependency_overrides[get_http_transport] = lambda: failing

        response = client.get("/")

        assert response.status_code == 200
        assert 'window.__preCachedResponses["/api/greeting"]' not in response.text
        assert failing.calls == ["http://testserver/api/greeting"]

    def test_request_id_is_echoed(self, client):
        response = client.get("/", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"


class TestApiEndpoints:
    def test_greeting(self, client):
        response = client.get("/api/greeting")

        assert response.status_code == 200
        assert response.json() == {"message": "Hello from the server"}

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "X-Request-ID" in response.headers

    @pytest.mark.asyncio
    async def test_invalid_argument_maps_to_bad_request(self):
        from primecache.api.errors import domain_error_handler
        from primecache.domain.exceptions import InvalidArgumentError
        from starlette.requests import Request

        request = Request({"type": "http", "method": "GET", "path": "/", "headers": []})
        response = await domain_error_handler(
            request, InvalidArgumentError("Value cannot be null or empty", argument="url")
        )

        assert response.status_code == 400
        assert b"INVALID_ARGUMENT" in response.body
