from datetime import datetime, timezone

from fastapi import APIRouter

from magicquill_proxy.schemas import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check():
    """Liveness check, always succeeds."""
    return HealthResponse(
        status="MagicQuill Proxy Server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


def get_router():
    return router
