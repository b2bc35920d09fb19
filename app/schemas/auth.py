"""Authentication schemas"""
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Username/password login"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    """JWT token response"""
    access_token: str
    token_type: str = "bearer"
    user_id: int
