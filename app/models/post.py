"""
Posts and the engagement rows that hang off them
"""
from app.models.base import Record


class Post(Record):
    """Short text update owned by a user"""

    user_id: int
    content: str


class Like(Record):
    """One user's like on one post"""

    user_id: int
    post_id: int


class Comment(Record):
    user_id: int
    post_id: int
    content: str
