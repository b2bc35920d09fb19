"""
User profile endpoints
"""
from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user
from app.database import EntityStore, get_store
from app.models.user import User
from app.schemas.user import UserResponse, UserUpdate
from app.services.user_service import user_service

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_my_profile(
    current_user: User = Depends(get_current_user)
):
    """Get current user's profile"""
    return UserResponse.model_validate(current_user)


@router.put("/me", response_model=UserResponse)
async def update_my_profile(
    update_data: UserUpdate,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store)
):
    """
    Update current user's profile

    Only the fields present in the request body are changed.
    """
    user = user_service.update_profile(store, current_user.id, update_data)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store)
):
    """Get a user's public profile"""
    return UserResponse.model_validate(user_service.get_user(store, user_id))
