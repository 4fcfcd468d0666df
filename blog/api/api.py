from fastapi import APIRouter

from blog.api.routers import health_router, posts_router

router = APIRouter(prefix="/api")
router.include_router(health_router.router, prefix="/health", tags=["health"])
router.include_router(posts_router.router, prefix="/posts", tags=["posts"])
