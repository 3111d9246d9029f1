from __future__ import annotations

from dataclasses import dataclass

from http_bridge.domain.model import ResponseDescriptor


@dataclass(frozen=True)
class ExecuteResult:
    status: str  # "OK" | "INVALID_METHOD" | "TRANSPORT_ERROR"
    response: ResponseDescriptor | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "OK"
