from aimarket.services.metrics_service import compute_metrics


def test_metrics_with_no_activity(client):
    resp = client.get("/api/metrics")
    assert resp.status_code == 200
    assert resp.json() == {
        "catalogCount": 3,
        "activationCount": 0,
        "briefCount": 0,
        "lastActivation": None,
        "lastBrief": None,
    }


def test_metrics_track_latest_entries(client):
    activation = client.post("/api/demo-activation", json={"moduleId": "audit-agent"}).json()["activation"]
    client.post("/api/briefs", json={"module": "audit-agent"})
    brief = client.post("/api/briefs", json={"module": "ops-agent"}).json()["brief"]

    metrics = client.get("/api/metrics").json()
    assert metrics["activationCount"] == 1
    assert metrics["briefCount"] == 2
    assert metrics["lastActivation"] == activation["issuedAt"]
    assert metrics["lastBrief"] == brief["createdAt"]


def test_compute_metrics_counts_capped_logs(market):
    for _ in range(10):
        market.activations.issue_demo("growth-agent")
    assert compute_metrics(market)["activationCount"] == 8


def test_health_live(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["paypalConfigured"] is True
    assert body["uptime"] >= 0
    assert body["now"].endswith("Z")


def test_health_demo_mode(demo_client):
    assert demo_client.get("/api/health").json()["paypalConfigured"] is False


def test_storefront_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    for name in ("Audit IA", "Growth IA", "Ops IA"):
        assert name in html
    assert "client-id=client-id&currency=EUR" in html
    assert 'data-id="growth-agent"' in html


def test_storefront_page_placeholder_client_id(demo_client):
    assert "client-id=YOUR_PAYPAL_CLIENT_ID" in demo_client.get("/").text


def test_stylesheet(client):
    resp = client.get("/assets/styles.css")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/css")
    assert ".card" in resp.text
