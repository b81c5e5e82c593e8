"""Health and metadata endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from codeshelf import __version__
from codeshelf.infrastructure.persistence.mongodb_service import mongodb_service
from codeshelf.shared.config import settings


def create_health_router() -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/")
    async def root():
        return {
            "name": settings.site_name,
            "version": __version__,
            "status": "running",
        }

    @router.get("/health")
    async def health_check():
        if settings.storage_backend == "mongodb":
            database = "connected" if mongodb_service.connected else "disconnected"
        else:
            database = "memory"
        return {
            "status": "healthy",
            "storage": settings.storage_backend,
            "database": database,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return router


__all__ = ["create_health_router"]
