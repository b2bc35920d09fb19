"""
Record types kept in the entity store
"""
from app.models.base import Record
from app.models.user import User
from app.models.post import Post, Like, Comment
from app.models.social import Friendship, FriendStatus

__all__ = [
    "Record",
    # User
    "User",
    # Posts
    "Post",
    "Like",
    "Comment",
    # Social
    "Friendship",
    "FriendStatus",
]
