"""
API v1 routes aggregation
"""
from fastapi import APIRouter
from app.api.v1 import auth, users, posts, social, admin

api_router = APIRouter()

# Authentication
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])

# Users
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Posts, feed, likes, comments
api_router.include_router(posts.router, tags=["posts"])

# Social/Friends
api_router.include_router(social.router, tags=["social"])

# Moderation
api_router.include_router(admin.router, tags=["admin"])
