from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Callable

from http_bridge.application.ports.http_transport_port import HttpTransportPort
from http_bridge.domain.errors import TransportError
from http_bridge.domain.model import RequestDescriptor, ResponseDescriptor

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Executes one HTTP request and normalizes its response.

    Raises ``InvalidMethod`` before any network activity when the method is not
    a token, and ``TransportError`` for every failure after that. Nothing is
    retried and no partial response is ever returned.
    """

    def __init__(
        self,
        transport: HttpTransportPort,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.transport = transport
        self.clock = clock

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
    ) -> ResponseDescriptor:
        request = RequestDescriptor.create(method, url, headers, body)
        prepared = self.transport.build(request)

        logger.debug("Dispatching %s %s", request.method, url)
        start = self.clock()
        try:
            raw = await self.transport.send(prepared)
        except TransportError as e:
            logger.warning("%s %s failed: %s", request.method, url, e)
            raise
        elapsed_ms = max(0, int((self.clock() - start) * 1000))

        response = ResponseDescriptor.from_raw(raw, elapsed_ms)
        logger.info(
            "%s %s -> %s in %d ms (%d bytes)",
            request.method, url, response.status, response.time, response.size,
        )
        return response
