from fastapi import APIRouter

from tubely.api.endpoints import health, thumbnails, videos

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(thumbnails.router, prefix="/thumbnails", tags=["thumbnails"])
api_router.include_router(videos.router, prefix="/videos", tags=["videos"])
