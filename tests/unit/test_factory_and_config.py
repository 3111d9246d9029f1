import asyncio
import logging

import pytest

from http_bridge.config import Settings
from http_bridge.infrastructure.adapters.http.factory import get_transport
from http_bridge.infrastructure.adapters.http.httpx_transport import HttpxTransport
from http_bridge.infrastructure.adapters.http.requests_transport import RequestsTransport
from http_bridge.logging_config import configure_logging


@pytest.mark.parametrize("name,expected", [("httpx", HttpxTransport), ("requests", RequestsTransport), ("HTTPX", HttpxTransport)])
def test_get_transport_by_name(name, expected):
    transport = get_transport(Settings(transport=name))
    try:
        assert isinstance(transport, expected)
    finally:
        asyncio.run(transport.aclose())


def test_get_transport_passes_settings_through():
    transport = get_transport(Settings(transport="requests", http_timeout=3.0, user_agent="ua/2", max_redirects=4))
    assert transport.timeout == 3.0
    assert transport.session.headers["User-Agent"] == "ua/2"
    assert transport.session.max_redirects == 4


def test_unknown_transport_is_rejected():
    with pytest.raises(ValueError, match="Unknown transport"):
        get_transport(Settings(transport="curl"))


def test_settings_are_frozen():
    with pytest.raises(Exception):
        Settings().transport = "requests"  # type: ignore[misc]


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    configure_logging("WARNING")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
