"""
Admin endpoints - user moderation and post removal
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import settings
from app.core.dependencies import get_current_admin
from app.core.exceptions import NotFoundError
from app.database import EntityStore, get_store
from app.models.user import User
from app.schemas.common import ActionResponse
from app.schemas.post import AdminPostResponse
from app.schemas.user import UserResponse
from app.services.post_service import post_service
from app.services.user_service import user_service

router = APIRouter(prefix="/admin", tags=["admin"])


def _protect_admin(user_id: int, action: str):
    if user_id == settings.ADMIN_USER_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot {action} admin user"
        )


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin)
):
    """List every user, sorted by name"""
    return [UserResponse.model_validate(u) for u in user_service.list_users(store)]


@router.get("/posts", response_model=List[AdminPostResponse])
async def list_posts(
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin)
):
    """List every post with its author and engagement counts"""
    return post_service.get_all_posts_with_authors(store)


@router.delete("/users/{user_id}", response_model=ActionResponse)
async def delete_user(
    user_id: int,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin)
):
    """Delete a user together with their posts, likes, comments and friend links"""
    _protect_admin(user_id, "delete")

    if not user_service.delete_user(store, user_id):
        raise NotFoundError("User not found")

    return ActionResponse(success=True, message="User deleted successfully")


@router.delete("/posts/{post_id}", response_model=ActionResponse)
async def delete_post(
    post_id: int,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin)
):
    """Delete a post with its likes and comments"""
    if not post_service.delete_post(store, post_id):
        raise NotFoundError("Post not found")

    return ActionResponse(success=True, message="Post deleted successfully")


@router.put("/users/{user_id}/ban", response_model=UserResponse)
async def toggle_ban(
    user_id: int,
    store: EntityStore = Depends(get_store),
    admin: User = Depends(get_current_admin)
):
    """Ban or unban a user"""
    _protect_admin(user_id, "ban")
    return UserResponse.model_validate(user_service.toggle_ban(store, user_id))
