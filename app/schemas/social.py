"""
Social and friends schemas
"""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel

from app.models.social import FriendStatus
from app.schemas.user import UserResponse


class FriendRequestCreate(BaseModel):
    """Create friend request"""
    friend_id: int


class FriendRequestResponse(BaseModel):
    """Friend request response"""
    id: int
    user_id: int
    friend_id: int
    status: FriendStatus
    created_at: datetime

    class Config:
        from_attributes = True


class FriendWithUser(BaseModel):
    """Friend link paired with the other party's profile"""
    id: int
    user_id: int
    friend_id: int
    status: FriendStatus
    created_at: datetime
    user: UserResponse


class FriendListResponse(BaseModel):
    """Response with list of friends"""
    friends: List[FriendWithUser]
    total_count: int


class PendingRequestsResponse(BaseModel):
    """Response with incoming pending friend requests"""
    requests: List[FriendWithUser]
    total_count: int


class FriendshipStatusResponse(BaseModel):
    """Relationship between the current user and another user"""
    user_id: int
    # 'none' when no link exists, otherwise the link status
    status: str
    request_id: Optional[int] = None
    is_requester: bool = False
