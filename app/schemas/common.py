"""Shared response schemas"""
from pydantic import BaseModel


class ActionResponse(BaseModel):
    """Response after a state-changing action with no other payload"""
    success: bool
    message: str
