from fastapi import APIRouter

from http_bridge.config import settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health() -> dict[str, str]:  # type: ignore[misc]
    return {"status": "ok", "transport": settings.transport}
