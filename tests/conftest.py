"""
Pytest configuration and fixtures.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from primecache.domain.value_objects.prime_request import RequestContext
from tests._helpers.fakes import FakeTransport


@pytest.fixture
def request_context():
    """The page request https://example.com/app/page?x=1."""
    return RequestContext(
        scheme="https",
        host="example.com",
        path_base="/app",
        path="/page",
        query_string="?x=1",
    )


@pytest.fixture
def mock_logger():
    return Mock()


@pytest.fixture
def fake_transport():
    return FakeTransport(status_code=200, body='{"message":"Hello from a fake"}')


# ---------- API TESTING FIXTURES ----------


@pytest.fixture
def app(fake_transport):
    """FastAPI application with the outbound transport replaced by a fake."""
    from primecache.infra.config.dependencies import get_http_transport
    from primecache.main import app

    app.dependency_overrides[get_http_transport] = lambda: fake_transport
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
