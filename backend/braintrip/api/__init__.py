"""API package."""

from fastapi import APIRouter

from .routes import router as content_router
from .trips import router as trips_router

router = APIRouter()
router.include_router(content_router)
router.include_router(trips_router)

__all__ = ["router"]
