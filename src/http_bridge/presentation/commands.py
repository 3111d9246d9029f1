from __future__ import annotations

import logging
from collections.abc import Mapping

from http_bridge.application.dtos.execute_result_dto import ExecuteResult
from http_bridge.application.ports.http_transport_port import HttpTransportPort
from http_bridge.application.use_cases.execute_request import RequestExecutor
from http_bridge.domain.errors import InvalidMethod, TransportError
from http_bridge.infrastructure.adapters.http.factory import get_transport
from http_bridge.infrastructure.adapters.metrics_adapter import PrometheusMetricsAdapter

logger = logging.getLogger(__name__)

_metrics = PrometheusMetricsAdapter()


async def make_request(
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    body: str | None = None,
    *,
    transport: HttpTransportPort | None = None,
) -> ExecuteResult:
    """Command entry point used by host shells.

    Returns an ExecuteResult carrying either the response or the error text.
    A transport passed in is left open; one created here is closed afterwards.
    """
    owned = transport is None
    transport = transport or get_transport()
    try:
        response = await RequestExecutor(transport).execute(method, url, headers, body)
    except InvalidMethod as e:
        _metrics.record("invalid_method")
        return ExecuteResult("INVALID_METHOD", error=e.message)
    except TransportError as e:
        _metrics.record("transport_error")
        return ExecuteResult("TRANSPORT_ERROR", error=e.message)
    finally:
        if owned:
            await transport.aclose()
    _metrics.record("ok", response.time)
    return ExecuteResult("OK", response=response)
