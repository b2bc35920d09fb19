"""
Post, like and comment schemas
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

from app.schemas.user import UserResponse


class PostCreate(BaseModel):
    """Create a post"""
    content: str = Field(..., min_length=1, max_length=5000)


class PostResponse(BaseModel):
    id: int
    user_id: int
    content: str
    created_at: datetime

    class Config:
        from_attributes = True


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class CommentWithAuthor(BaseModel):
    """Comment enriched with its author"""
    id: int
    user_id: int
    post_id: int
    content: str
    created_at: datetime
    author: UserResponse


class PostWithAuthor(BaseModel):
    """Feed entry: post plus author and engagement aggregates"""
    id: int
    user_id: int
    content: str
    created_at: datetime
    author: UserResponse
    likes: int
    liked: bool
    comments: List[CommentWithAuthor]


class FeedResponse(BaseModel):
    """Reverse-chronological feed for one viewer"""
    posts: List[PostWithAuthor]
    total_count: int


class AdminPostResponse(BaseModel):
    """Post as listed on the moderation surface"""
    id: int
    user_id: int
    content: str
    created_at: datetime
    author: UserResponse
    likes_count: int
    comments_count: int


class LikeResponse(BaseModel):
    id: int
    user_id: int
    post_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class LikeActionResponse(BaseModel):
    """Response after liking a post"""
    like: LikeResponse
    count: int


class UnlikeResponse(BaseModel):
    """Response after removing a like"""
    success: bool
    count: int
