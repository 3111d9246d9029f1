from __future__ import annotations

from http_bridge.application.ports.http_transport_port import HttpTransportPort
from http_bridge.config import Settings, settings as default_settings
from http_bridge.infrastructure.adapters.http.httpx_transport import HttpxTransport
from http_bridge.infrastructure.adapters.http.requests_transport import RequestsTransport

_TRANSPORTS = {
    "httpx": HttpxTransport,
    "requests": RequestsTransport,
}


def get_transport(settings: Settings | None = None) -> HttpTransportPort:
    """Builds the transport named by ``settings.transport``."""
    settings = settings or default_settings
    try:
        factory = _TRANSPORTS[settings.transport.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown transport {settings.transport!r}; expected one of {sorted(_TRANSPORTS)}"
        ) from None
    return factory(
        timeout=settings.http_timeout,
        follow_redirects=settings.follow_redirects,
        max_redirects=settings.max_redirects,
        user_agent=settings.user_agent,
    )
