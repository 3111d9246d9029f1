import pytest
from fastapi.testclient import TestClient

from http_bridge.domain.model import RawResponse
from http_bridge.presentation.api.main import app
from tests.unit._fakes_transport import FakeTransport


@pytest.fixture
def client():
    yield TestClient(app)
    app.state.transport = None


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_execute_returns_response_descriptor(client):
    app.state.transport = FakeTransport(RawResponse(404, "Not Found", [(b"content-type", b"text/plain")], b"gone"))
    resp = client.post("/v1/requests/execute", json={"method": "GET", "url": "http://example.test/status/404"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == 404
    assert data["statusText"] == "Not Found"
    assert data["body"] == "gone"
    assert data["size"] == 4
    assert data["headers"] == {"content-type": "text/plain"}
    assert data["time"] >= 0


def test_execute_passes_headers_and_body(client):
    transport = FakeTransport()
    app.state.transport = transport
    client.post(
        "/v1/requests/execute",
        json={"method": "POST", "url": "http://example.test/echo", "headers": {"Content-Type": "text/plain"}, "body": "hello"},
    )
    (request,) = transport.built
    assert request.body == "hello"
    assert dict(request.headers) == {"Content-Type": "text/plain"}


def test_invalid_method_is_422(client):
    app.state.transport = FakeTransport()
    resp = client.post("/v1/requests/execute", json={"method": "G E T", "url": "http://example.test/"})
    assert resp.status_code == 422
    assert resp.json()["kind"] == "InvalidMethod"


def test_transport_error_is_502(client):
    app.state.transport = FakeTransport(fail_send="connection refused")
    resp = client.post("/v1/requests/execute", json={"method": "GET", "url": "http://127.0.0.1:9/"})
    assert resp.status_code == 502
    assert resp.json() == {"error": "connection refused", "kind": "TransportError"}


def test_metrics_exposes_request_counter(client):
    app.state.transport = FakeTransport()
    client.post("/v1/requests/execute", json={"method": "GET", "url": "http://example.test/"})
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "http_bridge_requests_total" in resp.text
