from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from http_bridge.config import settings
from http_bridge.infrastructure.adapters.http.factory import get_transport
from http_bridge.infrastructure.adapters.metrics_adapter import registry
from http_bridge.logging_config import configure_logging
from http_bridge.presentation.api.routes.health import router as health_router
from http_bridge.presentation.api.routes.requests import router as requests_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    app.state.transport = get_transport(settings)
    try:
        yield
    finally:
        await app.state.transport.aclose()
        app.state.transport = None


app = FastAPI(title="HTTP Bridge", version="0.1.0", lifespan=lifespan)
app.include_router(health_router)
app.include_router(requests_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
