import base64
import json
import re

import httpx

from aimarket.services.paypal_client import order_path_segment


ORDER_BODY = {"itemId": "growth-agent", "itemName": "Growth IA", "amount": "79.00"}


def test_create_order_forwards_provider_response(client, fake_paypal):
    resp = client.post("/api/orders", json=ORDER_BODY)
    assert resp.status_code == 201
    assert resp.json() == {"id": "ORDER1", "status": "CREATED"}
    assert fake_paypal.paths() == ["/v1/oauth2/token", "/v2/checkout/orders"]


def test_token_request_uses_basic_auth(client, fake_paypal):
    client.post("/api/orders", json=ORDER_BODY)

    token_request = fake_paypal.requests[0]
    scheme, encoded = token_request.headers["Authorization"].split(" ", 1)
    assert scheme == "Basic"
    assert base64.b64decode(encoded).decode() == "client-id:client-secret"
    assert token_request.content == b"grant_type=client_credentials"


def test_order_body_sent_to_provider(client, fake_paypal):
    client.post("/api/orders", json=ORDER_BODY)

    order_request = fake_paypal.requests[1]
    assert order_request.headers["Authorization"] == "Bearer A21AA-test-token"
    assert json.loads(order_request.content) == {
        "intent": "CAPTURE",
        "purchase_units": [
            {
                "reference_id": "growth-agent",
                "description": "Growth IA",
                "amount": {"currency_code": "EUR", "value": "79.00"},
            }
        ],
    }


def test_numeric_amount_is_sent_as_decimal_string(client, fake_paypal):
    client.post("/api/orders", json={"itemId": "ops-agent", "itemName": "Ops IA", "amount": 99})
    sent = json.loads(fake_paypal.requests[1].content)
    assert sent["purchase_units"][0]["amount"]["value"] == "99.00"


def test_create_order_missing_fields(client, fake_paypal):
    resp = client.post("/api/orders", json={"itemName": "Growth IA"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing item data"}
    assert fake_paypal.requests == []


def test_create_order_provider_error_status_is_forwarded(client, fake_paypal):
    fake_paypal.order = (422, {"name": "UNPROCESSABLE_ENTITY", "details": []})
    resp = client.post("/api/orders", json=ORDER_BODY)
    assert resp.status_code == 422
    assert resp.json()["name"] == "UNPROCESSABLE_ENTITY"


def test_token_rejection_is_500_with_raw_body(client, fake_paypal):
    fake_paypal.token = (401, '{"error":"invalid_client"}')
    resp = client.post("/api/orders", json=ORDER_BODY)
    assert resp.status_code == 500
    assert "invalid_client" in resp.json()["error"]
    assert fake_paypal.paths() == ["/v1/oauth2/token"]


def test_create_order_network_error(client, fake_paypal):
    fake_paypal.failures["/v2/checkout/orders"] = httpx.ConnectError("connection refused")
    resp = client.post("/api/orders", json=ORDER_BODY)
    assert resp.status_code == 500
    assert "connection refused" in resp.json()["error"]


def test_create_order_in_demo_mode_does_not_call_provider(demo_client, fake_paypal):
    resp = demo_client.post("/api/orders", json=ORDER_BODY)
    assert resp.status_code == 500
    assert "not configured" in resp.json()["error"]
    assert fake_paypal.requests == []


def test_capture_issues_activation(client, fake_paypal):
    resp = client.post("/api/orders/ORDER1/capture")
    assert resp.status_code == 201

    body = resp.json()
    assert body["payer"]["name"]["given_name"] == "Camille"
    activation = body["activation"]
    assert re.match(r"^AIM-GROWTH-AGENT-[0-9A-F]{20}$", activation["token"])
    assert activation["orderId"] == "ORDER1"
    assert activation["moduleName"] == "Growth IA"
    assert fake_paypal.paths()[-1] == "/v2/checkout/orders/ORDER1/capture"

    items = client.get("/api/activations").json()["items"]
    assert len(items) == 1
    assert items[0]["mode"] == "paypal"
    assert items[0]["token"] == activation["token"]


def test_capture_provider_failure_is_forwarded_without_activation(client, fake_paypal):
    fake_paypal.capture = (422, {"name": "UNPROCESSABLE_ENTITY", "details": [{"issue": "ORDER_NOT_APPROVED"}]})
    resp = client.post("/api/orders/ORDER1/capture")
    assert resp.status_code == 422
    assert "activation" not in resp.json()
    assert client.get("/api/activations").json() == {"items": []}


def test_capture_network_error(client, fake_paypal):
    fake_paypal.failures["/v2/checkout/orders/ORDER1/capture"] = httpx.ReadTimeout("timed out")
    resp = client.post("/api/orders/ORDER1/capture")
    assert resp.status_code == 500
    assert "timed out" in resp.json()["error"]
    assert client.get("/api/activations").json() == {"items": []}


def test_capture_without_reference_id(client, fake_paypal):
    fake_paypal.capture = (201, {"id": "ORDER2", "status": "COMPLETED"})
    activation = client.post("/api/orders/ORDER2/capture").json()["activation"]
    assert activation["token"].startswith("AIM-MODULE-")
    assert activation["moduleName"] == "Module IA"


def test_capturing_twice_issues_two_activations(client):
    first = client.post("/api/orders/ORDER1/capture").json()["activation"]
    second = client.post("/api/orders/ORDER1/capture").json()["activation"]
    assert first["token"] != second["token"]
    assert len(client.get("/api/activations").json()["items"]) == 2


def test_order_id_is_encoded_as_one_path_segment():
    assert order_path_segment("ORDER1") == "ORDER1"
    assert order_path_segment("ORDER1?x=1") == "ORDER1%3Fx%3D1"
    assert order_path_segment("a/b") == "a%2Fb"
    assert order_path_segment("..") == "%2E%2E"


def test_capture_keeps_query_characters_inside_the_path(client, fake_paypal):
    resp = client.post("/api/orders/ORDER1%3Fx=1/capture")
    assert resp.status_code == 201

    capture_request = fake_paypal.requests[-1]
    assert capture_request.url.raw_path == b"/v2/checkout/orders/ORDER1%3Fx%3D1/capture"
    assert capture_request.url.query == b""
    assert resp.json()["activation"]["orderId"] == "ORDER1?x=1"


def test_capture_does_not_resolve_dot_segments(client, fake_paypal):
    client.post("/api/orders/%2E%2E/capture")

    capture_request = fake_paypal.requests[-1]
    assert capture_request.url.raw_path == b"/v2/checkout/orders/%2E%2E/capture"
