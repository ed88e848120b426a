"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe. The registry is built before the app accepts requests."""
    return {"status": "ok"}
