"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/api/health")
async def health() -> dict[str, str]:
    """Liveness only; the SEC endpoints are not probed."""
    return {"status": "ok"}
