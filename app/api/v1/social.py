"""
Social/Friends API endpoints
"""
from fastapi import APIRouter, Depends, status

from app.database import EntityStore, get_store
from app.models.user import User
from app.core.dependencies import get_current_user
from app.schemas.social import (
    FriendRequestCreate,
    FriendRequestResponse,
    FriendListResponse,
    PendingRequestsResponse,
    FriendshipStatusResponse,
)
from app.services.social_service import social_service

router = APIRouter(prefix="/friends", tags=["social"])


@router.get("", response_model=FriendListResponse)
async def get_friends(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Get current user's friends list"""
    return social_service.get_friends(store, current_user.id)


@router.get("/requests", response_model=PendingRequestsResponse)
async def get_pending_requests(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Get pending friend requests sent to the current user"""
    return social_service.get_pending_requests(store, current_user.id)


@router.get("/status/{user_id}", response_model=FriendshipStatusResponse)
async def get_friendship_status(
    user_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Check the friend link between the current user and another user"""
    return social_service.get_friendship_status(store, current_user.id, user_id)


@router.post("/request", response_model=FriendRequestResponse, status_code=status.HTTP_201_CREATED)
async def send_friend_request(
    request: FriendRequestCreate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Send a friend request to another user"""
    friendship = social_service.send_friend_request(store, current_user.id, request.friend_id)
    return FriendRequestResponse.model_validate(friendship)


@router.put("/request/{request_id}/accept", response_model=FriendRequestResponse)
async def accept_friend_request(
    request_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Accept a friend request"""
    friendship = social_service.accept_friend_request(store, request_id)
    return FriendRequestResponse.model_validate(friendship)


@router.put("/request/{request_id}/reject", response_model=FriendRequestResponse)
async def reject_friend_request(
    request_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Reject a friend request"""
    friendship = social_service.reject_friend_request(store, request_id)
    return FriendRequestResponse.model_validate(friendship)


@router.get("/count")
async def get_friend_count(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Get friend count for current user"""
    count = social_service.get_friend_count(store, current_user.id)
    return {"count": count}


@router.get("/check/{user_id}")
async def check_friendship(
    user_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    """Check if you are friends with another user"""
    is_friend = social_service.are_friends(store, current_user.id, user_id)
    return {"is_friend": is_friend, "user_id": user_id}
