"""API routes."""

from fastapi import APIRouter

from app.api.routes import auth, health, payments, profile

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(profile.router, prefix="/me", tags=["profile"])
router.include_router(payments.router, tags=["payments"])
