from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from http_bridge.domain.value_objects.http_method import HttpMethod


# =========================
# Request side
# =========================
@dataclass(frozen=True)
class RequestDescriptor:
    """One outgoing request as the caller described it.

    ``body=None`` means no payload at all; ``body=""`` is an empty payload.
    """

    method: HttpMethod
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None

    @classmethod
    def create(
        cls,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: str | None = None,
    ) -> "RequestDescriptor":
        return cls(HttpMethod(method), url, MappingProxyType(dict(headers or {})), body)

    @property
    def payload(self) -> bytes | None:
        return None if self.body is None else self.body.encode("utf-8")


# =========================
# Response side
# =========================
@dataclass(frozen=True)
class RawResponse:
    """What a transport hands back once the whole response has been received."""

    status: int
    reason: str
    raw_headers: list[tuple[bytes, bytes]]
    content: bytes


def _header_text(value: bytes) -> str:
    # visible ASCII plus tab; anything else is not representable as header text
    if all(b == 0x09 or 0x20 <= b < 0x7F for b in value):
        return value.decode("ascii")
    return ""


def normalize_headers(raw_headers: Iterable[tuple[bytes, bytes]]) -> dict[str, str]:
    """Collapse raw header pairs into a plain mapping.

    Names are lower-cased; a repeated name keeps its last value; a value that is
    not text becomes an empty string.
    """
    headers: dict[str, str] = {}
    for name, value in raw_headers:
        headers[name.decode("latin-1").lower()] = _header_text(value)
    return headers


@dataclass(frozen=True)
class ResponseDescriptor:
    status: int
    status_text: str
    headers: Mapping[str, str]
    body: str
    time: int
    size: int

    @classmethod
    def from_raw(cls, raw: RawResponse, elapsed_ms: int) -> "ResponseDescriptor":
        return cls(
            status=raw.status,
            status_text=raw.reason,
            headers=MappingProxyType(normalize_headers(raw.raw_headers)),
            body=raw.content.decode("utf-8", errors="replace"),
            time=elapsed_ms,
            size=len(raw.content),
        )

    def json(self) -> Any:
        return json.loads(self.body)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "statusText": self.status_text,
            "headers": dict(self.headers),
            "body": self.body,
            "time": self.time,
            "size": self.size,
        }
