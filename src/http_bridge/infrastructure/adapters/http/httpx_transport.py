from __future__ import annotations

import httpx

from http_bridge.application.ports.http_transport_port import HttpTransportPort
from http_bridge.domain.errors import TransportError
from http_bridge.domain.model import RawResponse, RequestDescriptor
from http_bridge.infrastructure.adapters.http.cookies import disable_cookie_persistence


class HttpxTransport(HttpTransportPort):
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | None = None,
        follow_redirects: bool = True,
        max_redirects: int = 10,
        user_agent: str = "http-bridge/0.1",
    ) -> None:
        """HTTP transport adapter backed by a shared httpx.AsyncClient.

        - Connection reuse is left to the client's pool
        - Cookies are never stored, so calls sharing the client stay independent
        - Bodies are requested uncompressed, so ``size`` is the wire length
        - Every httpx failure is reported as TransportError

        Args:
            client (httpx.AsyncClient | None, optional): Client to use instead of a new one. Defaults to None.
            timeout (float | None, optional): Timeout for requests, None disables it. Defaults to None.
            follow_redirects (bool, optional): Whether to follow redirects. Defaults to True.
            max_redirects (int, optional): Redirect cap. Defaults to 10.
            user_agent (str, optional): Default User-Agent header. Defaults to "http-bridge/0.1".
        """
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=follow_redirects,
            max_redirects=max_redirects,
            headers={"User-Agent": user_agent, "Accept-Encoding": "identity"},
        )
        disable_cookie_persistence(self._client.cookies.jar)

    def build(self, request: RequestDescriptor) -> httpx.Request:
        """Builds the outgoing request without sending it.

        Args:
            request (RequestDescriptor): Validated request descriptor.

        Returns:
            httpx.Request: Request ready to be sent, method case preserved.
        """
        payload = request.payload
        try:
            headers = httpx.Headers()
            for name, value in request.headers.items():
                headers[name] = value
            if payload is not None and "content-length" not in headers and "transfer-encoding" not in headers:
                # an empty payload still announces itself, unlike no payload at all
                headers["Content-Length"] = str(len(payload))
            prepared = self._client.build_request(
                str(request.method), request.url, headers=headers, content=payload
            )
        except (httpx.InvalidURL, httpx.HTTPError, ValueError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        # httpx upper-cases methods; tokens are case-sensitive
        prepared.method = str(request.method)
        return prepared

    async def send(self, prepared: httpx.Request) -> RawResponse:
        """Sends the request and reads the full response body.

        Args:
            prepared (httpx.Request): Request returned by build().

        Returns:
            RawResponse: Status, canonical reason, raw headers and body bytes.
        """
        try:
            resp = await self._client.send(prepared)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        return RawResponse(
            status=resp.status_code,
            reason=httpx.codes.get_reason_phrase(resp.status_code),
            raw_headers=list(resp.headers.raw),
            content=resp.content,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
