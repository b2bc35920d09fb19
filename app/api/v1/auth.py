"""
Authentication endpoints - registration, login and JWT management
"""
from fastapi import APIRouter, Depends, Request, status
from app.core.config import settings
from app.core.dependencies import get_current_user
from app.core.rate_limit import limiter
from app.database import EntityStore, get_store
from app.models.user import User
from app.schemas.auth import LoginRequest, Token
from app.schemas.common import ActionResponse
from app.schemas.user import UserRegister, UserResponse
from app.services.auth_service import AuthService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


def _token_for(auth_service: AuthService, user: User) -> Token:
    return Token(
        access_token=auth_service.create_access_token_for_user(user),
        token_type="bearer",
        user_id=user.id
    )


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def register(
    request: Request,
    data: UserRegister,
    store: EntityStore = Depends(get_store)
):
    """
    Create an account and return a JWT for it

    - **username**: unique login name
    - **password**: stored only as a bcrypt hash
    - **name**: display name
    """
    auth_service = AuthService(store)
    user = auth_service.register(data)
    return _token_for(auth_service, user)


@router.post("/login", response_model=Token)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def login(
    request: Request,
    data: LoginRequest,
    store: EntityStore = Depends(get_store)
):
    """
    Exchange username and password for a JWT

    Banned accounts are refused even with valid credentials.
    """
    auth_service = AuthService(store)
    user = auth_service.authenticate(data.username, data.password)
    logger.info(f"Authentication successful for user: {user.id}")
    return _token_for(auth_service, user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """
    Get current authenticated user information

    Requires Bearer token in Authorization header.
    """
    return UserResponse.model_validate(current_user)


@router.post("/logout", response_model=ActionResponse)
async def logout(
    current_user: User = Depends(get_current_user)
):
    """
    Logout user

    JWT tokens are stateless so this is mostly for client-side cleanup.
    """
    logger.info(f"User logged out: {current_user.id}")
    return ActionResponse(success=True, message="Logged out successfully")


@router.post("/refresh", response_model=Token)
async def refresh_token(
    current_user: User = Depends(get_current_user),
    store: EntityStore = Depends(get_store)
):
    """Return a fresh JWT for the authenticated user"""
    return _token_for(AuthService(store), current_user)
