"""HTTP interface: routers, dependencies and error handlers."""
from fastapi import APIRouter

from app.interfaces.http.routers import analytics, auth, community, scripts


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(scripts.router, prefix="/scripts", tags=["scripts"])
    router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
    router.include_router(community.router, prefix="/community", tags=["community"])
    return router


__all__ = [
    "create_api_router",
]
