from __future__ import annotations

import asyncio
import http.client

import requests
from requests.structures import CaseInsensitiveDict

from http_bridge.application.ports.http_transport_port import HttpTransportPort
from http_bridge.domain.errors import TransportError
from http_bridge.domain.model import RawResponse, RequestDescriptor
from http_bridge.infrastructure.adapters.http.cookies import disable_cookie_persistence


class RequestsTransport(HttpTransportPort):
    """HTTP transport adapter backed by a persistent requests.Session.

    - The blocking exchange runs in a worker thread so callers can await it
    - Raw header lines are read from urllib3 so repeated names stay visible
    - Cookies are never stored and bodies are requested uncompressed
    - Every requests failure is reported as TransportError
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = None,
        follow_redirects: bool = True,
        max_redirects: int = 10,
        user_agent: str = "http-bridge/0.1",
    ) -> None:
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent
        self.session.headers["Accept-Encoding"] = "identity"
        disable_cookie_persistence(self.session.cookies)
        self.session.max_redirects = max_redirects
        self.timeout = timeout
        self.follow_redirects = follow_redirects

    def build(self, request: RequestDescriptor) -> requests.PreparedRequest:
        headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
        for name, value in request.headers.items():
            headers[name] = value
        payload = request.payload
        if payload is not None and "content-length" not in headers and "transfer-encoding" not in headers:
            headers["Content-Length"] = str(len(payload))
        try:
            prepared = self.session.prepare_request(
                requests.Request(str(request.method), request.url, headers=headers, data=payload)
            )
        except (requests.RequestException, ValueError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        # requests upper-cases methods; tokens are case-sensitive
        prepared.method = str(request.method)
        return prepared

    async def send(self, prepared: requests.PreparedRequest) -> RawResponse:
        return await asyncio.to_thread(self._send_blocking, prepared)

    def _send_blocking(self, prepared: requests.PreparedRequest) -> RawResponse:
        try:
            resp = self.session.send(
                prepared, timeout=self.timeout, allow_redirects=self.follow_redirects
            )
            content = resp.content
        except (requests.RequestException, ValueError) as e:
            # header text http.client cannot encode surfaces as UnicodeEncodeError
            raise TransportError(str(e) or type(e).__name__) from e
        raw_headers = getattr(resp.raw, "headers", None)
        lines = raw_headers.iteritems() if hasattr(raw_headers, "iteritems") else resp.headers.items()
        return RawResponse(
            status=resp.status_code,
            reason=http.client.responses.get(resp.status_code, ""),
            # http.client decodes header lines as latin-1
            raw_headers=[(k.encode("latin-1"), v.encode("latin-1")) for k, v in lines],
            content=content or b"",
        )

    async def aclose(self) -> None:
        self.session.close()

    async def __aenter__(self) -> "RequestsTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
