"""Health check router."""

from fastapi import APIRouter

router = APIRouter(tags=["System"])


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    """Liveness check for load balancers."""
    return {"status": "success", "message": "Service is healthy"}
