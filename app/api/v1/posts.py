"""
Post, feed, like and comment endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user
from app.database import EntityStore, get_store
from app.models.user import User
from app.schemas.post import (
    CommentCreate,
    CommentWithAuthor,
    FeedResponse,
    LikeActionResponse,
    LikeResponse,
    PostCreate,
    PostResponse,
    UnlikeResponse,
)
from app.services.feed_service import feed_service
from app.services.post_service import post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Publish a post as the current user"""
    post = post_service.create_post(store, current_user.id, data.content)
    return PostResponse.model_validate(post)


@router.get("", response_model=FeedResponse)
async def get_feed(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Get the current user's feed (own posts and friends' posts, newest first)"""
    return feed_service.get_feed(store, current_user.id)


@router.get("/user/{user_id}", response_model=List[PostResponse])
async def get_user_posts(
    user_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Get a user's posts, newest first"""
    posts = post_service.get_posts_by_user(store, user_id)
    return [PostResponse.model_validate(p) for p in posts]


@router.post("/{post_id}/like", response_model=LikeActionResponse, status_code=status.HTTP_201_CREATED)
async def like_post(
    post_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Like a post"""
    like, count = post_service.like_post(store, current_user.id, post_id)
    return LikeActionResponse(like=LikeResponse.model_validate(like), count=count)


@router.delete("/{post_id}/like", response_model=UnlikeResponse)
async def unlike_post(
    post_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Remove the current user's like (no-op if there is none)"""
    count = post_service.unlike_post(store, current_user.id, post_id)
    return UnlikeResponse(success=True, count=count)


@router.post("/{post_id}/comments", response_model=CommentWithAuthor, status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: int,
    data: CommentCreate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Comment on a post"""
    return post_service.add_comment(store, current_user.id, post_id, data.content)


@router.get("/{post_id}/comments", response_model=List[CommentWithAuthor])
async def get_comments(
    post_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Get a post's comments, oldest first"""
    return post_service.get_comments(store, post_id)
