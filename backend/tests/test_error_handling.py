import logging

import pytest
from fastapi.testclient import TestClient


def fail(*args, **kwargs):
    raise RuntimeError("boom")


@pytest.fixture
def lenient_client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_unexpected_demo_activation_error_is_500(app, lenient_client, monkeypatch):
    monkeypatch.setattr(app.state.market.activations, "issue_demo", fail)

    resp = lenient_client.post("/api/demo-activation", json={"moduleId": "audit-agent"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "boom"}


def test_unexpected_brief_error_is_500(app, lenient_client, monkeypatch):
    monkeypatch.setattr(app.state.market.briefs, "submit", fail)

    resp = lenient_client.post("/api/briefs", json={"module": "ops-agent"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "boom"}
    assert lenient_client.get("/api/briefs").json() == {"items": []}


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="aimarket.api"):
        client.post("/api/demo-activation", json={"moduleId": "growth-agent"})
        client.post("/api/briefs", json={"module": "ops-agent"})

    messages = [record.getMessage() for record in caplog.records]
    assert "Demo activation requested for module: growth-agent" in messages
    assert "Brief submitted for module: ops-agent" in messages
