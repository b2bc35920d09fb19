"""
User account record
"""
from typing import Optional
from app.models.base import Record


class User(Record):
    """User account"""

    username: str
    # Opaque credential hash, never serialised outside the service layer
    password: str
    name: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    is_banned: bool = False
