"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from portfolio.api.v1 import auth, experience, posts, resume

api_router = APIRouter()

# Include all v1 routers with their prefixes and tags
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

api_router.include_router(
    experience.router,
    prefix="/experience",
    tags=["Experience"],
)

api_router.include_router(
    resume.router,
    prefix="/resume",
    tags=["Resume"],
)

api_router.include_router(
    posts.router,
    prefix="/posts",
    tags=["Posts"],
)
