from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _env_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    http_timeout: float | None = _env_float("HTTP_BRIDGE_TIMEOUT")
    follow_redirects: bool = _env_bool("HTTP_BRIDGE_FOLLOW_REDIRECTS", True)
    max_redirects: int = int(os.getenv("HTTP_BRIDGE_MAX_REDIRECTS", "10"))
    user_agent: str = os.getenv("HTTP_BRIDGE_USER_AGENT", "http-bridge/0.1")
    transport: str = os.getenv("HTTP_BRIDGE_TRANSPORT", "httpx")
    log_level: str = os.getenv("HTTP_BRIDGE_LOG_LEVEL", "INFO")


settings = Settings()
