from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from http_bridge.presentation.commands import make_request

router = APIRouter(prefix="/v1/requests", tags=["requests"])

_ERROR_STATUS = {"INVALID_METHOD": (422, "InvalidMethod"), "TRANSPORT_ERROR": (502, "TransportError")}


class ExecuteBody(BaseModel):
    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None


@router.post("/execute")
async def execute_endpoint(payload: ExecuteBody, request: Request):  # type: ignore[misc]
    # shared transport lives on app.state; None lets the command build its own
    transport = getattr(request.app.state, "transport", None)
    result = await make_request(
        payload.method, payload.url, payload.headers, payload.body, transport=transport
    )
    if result.ok and result.response is not None:
        return result.response.to_dict()
    status_code, kind = _ERROR_STATUS[result.status]
    return JSONResponse(status_code=status_code, content={"error": result.error, "kind": kind})
