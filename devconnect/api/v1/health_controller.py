# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness check"""
    return {"status": "ok"}
