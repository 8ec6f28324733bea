"""Liveness probe. Touches neither the key-value store nor the identity provider."""

from fastapi import APIRouter

from blog_backend.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
