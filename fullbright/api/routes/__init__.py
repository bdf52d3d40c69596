"""API routes."""

from fastapi import APIRouter

from fullbright.api.routes import admin, auth, health

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
