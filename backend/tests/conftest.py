import httpx
import pytest
from fastapi.testclient import TestClient

from aimarket.config import Settings
from aimarket.main import create_app


PAYPAL_TEST_BASE = "https://paypal.test"

CAPTURE_SUCCESS = {
    "id": "ORDER1",
    "status": "COMPLETED",
    "payer": {"name": {"given_name": "Camille", "surname": "Durand"}},
    "purchase_units": [
        {
            "reference_id": "growth-agent",
            "payments": {"captures": [{"id": "CAP1", "status": "COMPLETED"}]},
        }
    ],
}


class FakePayPal:
    """Stub PayPal API served through httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.token = (200, {"access_token": "A21AA-test-token", "expires_in": 32400})
        self.order = (201, {"id": "ORDER1", "status": "CREATED"})
        self.capture = (201, CAPTURE_SUCCESS)
        self.failures = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.failures:
            raise self.failures[path]

        if path == "/v1/oauth2/token":
            status, body = self.token
        elif path == "/v2/checkout/orders":
            status, body = self.order
        elif path.endswith("/capture"):
            status, body = self.capture
        else:
            status, body = 404, {"name": "RESOURCE_NOT_FOUND"}

        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def paths(self):
        return [request.url.path for request in self.requests]


@pytest.fixture
def live_settings():
    return Settings(
        paypal_client_id="client-id",
        paypal_client_secret="client-secret",
        paypal_api_base=PAYPAL_TEST_BASE,
    )


@pytest.fixture
def demo_settings():
    return Settings(
        paypal_client_id="",
        paypal_client_secret="",
        paypal_api_base=PAYPAL_TEST_BASE,
    )


@pytest.fixture
def fake_paypal():
    return FakePayPal()


@pytest.fixture
def app(live_settings, fake_paypal):
    return create_app(live_settings, paypal_transport=httpx.MockTransport(fake_paypal.handler))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def demo_client(demo_settings, fake_paypal):
    app = create_app(demo_settings, paypal_transport=httpx.MockTransport(fake_paypal.handler))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def market(app, client):
    # Requested through the client so the lifespan closes the PayPal client
    return app.state.market
