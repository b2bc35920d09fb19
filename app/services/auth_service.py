"""
Authentication Service - account registration, credential checks and JWT issuing
"""
from typing import Optional
from app.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    UserBannedError,
)
from app.core.security import create_access_token, hash_password, verify_password
from app.database import EntityStore
from app.models.user import User
from app.schemas.user import UserRegister
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations"""

    def __init__(self, store: EntityStore):
        self.store = store

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        return self.store.users.first(lambda u: u.username == username)

    def get_user_by_id(self, user_id) -> Optional[User]:
        """Get user by ID"""
        try:
            return self.store.users.get(int(user_id))
        except (ValueError, TypeError):
            return None

    def register(self, data: UserRegister) -> User:
        """
        Create a new account

        Args:
            data: Validated registration payload

        Returns:
            Newly created User

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        hashed = hash_password(data.password)

        with self.store.lock:
            if self.get_user_by_username(data.username) is not None:
                raise DuplicateUsernameError()

            user = self.store.users.insert(
                username=data.username,
                password=hashed,
                name=data.name,
                bio=data.bio,
                profile_image=data.profile_image,
            )

        logger.info(f"Created new user with ID: {user.id}")
        return user

    def authenticate(self, username: str, password: str) -> User:
        """
        Check a username/password pair

        Raises:
            InvalidCredentialsError: Unknown username or wrong password
            UserBannedError: Credentials are valid but the account is banned
        """
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.info(f"Failed login for username: {username}")
            raise InvalidCredentialsError()

        if user.is_banned:
            raise UserBannedError()

        return user

    def create_access_token_for_user(self, user: User) -> str:
        """Create JWT access token for user"""
        return create_access_token(data={"sub": str(user.id)})
