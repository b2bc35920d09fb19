"""User schemas for request/response validation"""
from pydantic import BaseModel, Field, field_serializer
from typing import Optional
from datetime import datetime

from app.utils.time_utils import to_utc_isoformat


class UserRegister(BaseModel):
    """Schema for creating an account"""
    username: str = Field(..., min_length=3, max_length=30)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    profile_image: Optional[str] = None


class UserUpdate(BaseModel):
    """Schema for updating user profile"""
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    profile_image: Optional[str] = None


class UserResponse(BaseModel):
    """
    Public view of a user.

    Every response that carries a user goes through this schema, which has
    no password field.
    """
    id: int
    username: str
    name: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    is_banned: bool
    created_at: datetime

    @field_serializer('created_at')
    def serialize_datetime(self, value: Optional[datetime]) -> Optional[str]:
        return to_utc_isoformat(value)

    class Config:
        from_attributes = True
