from __future__ import annotations

from typing import Any, Protocol

from http_bridge.domain.model import RawResponse, RequestDescriptor


class HttpTransportPort(Protocol):
    """HTTP transport abstraction (async, or blocking work pushed to a thread).

    ``build`` turns a descriptor into the transport's own request object without
    touching the network; ``send`` performs the exchange and drains the body.
    Both raise ``TransportError`` on failure.
    """

    def build(self, request: RequestDescriptor) -> Any: ...
    async def send(self, prepared: Any) -> RawResponse: ...
    async def aclose(self) -> None: ...
