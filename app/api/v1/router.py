from fastapi import APIRouter

from app.api.v1.endpoints.health import router as health_router
from app.api.v1.endpoints.photos import router as photos_router
from app.api.v1.endpoints.content_admin import router as content_admin_router


router = APIRouter(prefix="/v1")
router.include_router(health_router, tags=["health"])
router.include_router(photos_router, tags=["photos"])
router.include_router(content_admin_router, tags=["admin"])
