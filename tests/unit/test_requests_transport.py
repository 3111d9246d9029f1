import pytest

from http_bridge.domain.errors import TransportError
from http_bridge.domain.model import RequestDescriptor
from http_bridge.infrastructure.adapters.http.requests_transport import RequestsTransport


def _build(method="GET", url="http://example.test/", headers=None, body=None):
    return RequestsTransport().build(RequestDescriptor.create(method, url, headers, body))


def test_missing_body_has_no_content_length():
    prepared = _build()
    assert "Content-Length" not in prepared.headers
    assert prepared.body is None


def test_empty_body_has_zero_content_length():
    prepared = _build(body="")
    assert prepared.headers["Content-Length"] == "0"


def test_body_is_utf8_bytes():
    prepared = _build("POST", body="héllo")
    assert prepared.body == "héllo".encode("utf-8")
    assert prepared.headers["Content-Length"] == "6"


def test_headers_last_write_wins_and_override_session_defaults():
    prepared = _build(headers={"X-Token": "a", "x-token": "b", "User-Agent": "mine"})
    assert prepared.headers["X-Token"] == "b"
    assert prepared.headers["User-Agent"] == "mine"


def test_url_without_scheme_is_a_transport_error():
    with pytest.raises(TransportError):
        _build(url="not a url")


def test_session_configuration():
    transport = RequestsTransport(timeout=2.5, follow_redirects=False, max_redirects=3, user_agent="ua/1")
    assert transport.session.headers["User-Agent"] == "ua/1"
    assert transport.session.max_redirects == 3
    assert transport.timeout == 2.5
    assert transport.follow_redirects is False


def test_lowercase_method_goes_out_unchanged():
    assert _build("patch", body="x").method == "patch"


def test_session_asks_for_uncompressed_bodies():
    assert _build().headers["Accept-Encoding"] == "identity"


def test_session_cookie_jar_rejects_cookies():
    policy = RequestsTransport().session.cookies.get_policy()
    assert policy.set_ok(None, None) is False
    assert policy.return_ok(None, None) is False
