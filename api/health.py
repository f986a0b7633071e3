"""
Health check endpoint.
"""
from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Health Check")
def health():
    """Liveness probe for container orchestration."""
    return {"status": "ok"}
