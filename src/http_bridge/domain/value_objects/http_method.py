from __future__ import annotations

import re

from http_bridge.domain.errors import InvalidMethod

# RFC 9110 token: 1*tchar
_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class HttpMethod(str):
    """Value Object for an HTTP method token (standard or extension)."""

    def __new__(cls, value: str) -> "HttpMethod":
        if not value:
            raise InvalidMethod("invalid HTTP method: empty method")
        if _TOKEN.fullmatch(value) is None:
            bad = next(ch for ch in value if _TOKEN.fullmatch(ch) is None)
            raise InvalidMethod(f"invalid HTTP method {value!r}: illegal character {bad!r}")
        return str.__new__(cls, value)
