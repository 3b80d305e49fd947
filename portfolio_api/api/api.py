# portfolio_api/api/api.py
from fastapi import APIRouter

from portfolio_api.api.endpoints.auth import router as auth_router
from portfolio_api.api.endpoints.blog_posts import router as blog_posts_router
from portfolio_api.api.endpoints.photos import router as photos_router
from portfolio_api.api.endpoints.portfolio_items import router as portfolio_items_router
from portfolio_api.api.endpoints.profile import router as profile_router

api_router = APIRouter()

api_router.include_router(photos_router, prefix="/photos", tags=["photos"])
api_router.include_router(profile_router, prefix="/profile", tags=["profile"])
api_router.include_router(blog_posts_router, prefix="/blog-posts", tags=["blog-posts"])
api_router.include_router(portfolio_items_router, prefix="/portfolio-items", tags=["portfolio-items"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
