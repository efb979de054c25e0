"""V1 API router - aggregates all versioned endpoints."""

from fastapi import APIRouter

from api.routers import seo

router = APIRouter()

router.include_router(seo.router)


@router.get("/")
async def v1_root() -> dict[str, str]:
    """V1 API root."""
    return {"version": "1", "status": "active"}
