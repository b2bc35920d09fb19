"""
User service - profiles, moderation and account deletion
"""
import logging
from typing import List

from app.core.exceptions import DuplicateUsernameError, NotFoundError
from app.database import EntityStore
from app.models.user import User
from app.schemas.user import UserUpdate
from app.services.post_service import post_service

logger = logging.getLogger(__name__)


class UserService:
    """Service for user operations"""

    def get_user(self, store: EntityStore, user_id: int) -> User:
        user = store.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_user_by_username(self, store: EntityStore, username: str):
        return store.users.first(lambda u: u.username == username)

    def list_users(self, store: EntityStore) -> List[User]:
        """All users sorted by display name"""
        return sorted(store.users.filter(), key=lambda u: u.name)

    def update_profile(self, store: EntityStore, user_id: int, update_data: UserUpdate) -> User:
        """Update a user's profile fields"""
        changes = update_data.model_dump(exclude_unset=True)
        # Explicit nulls leave required fields unchanged
        for field in ("username", "name"):
            if changes.get(field, "") is None:
                del changes[field]

        with store.lock:
            self.get_user(store, user_id)

            username = changes.get("username")
            if username is not None:
                existing = self.get_user_by_username(store, username)
                if existing is not None and existing.id != user_id:
                    raise DuplicateUsernameError("Username already taken")

            user = store.users.update(user_id, **changes)

        logger.info(f"Updated profile for user: {user_id}")
        return user

    def toggle_ban(self, store: EntityStore, user_id: int) -> User:
        """Flip a user's banned flag"""
        with store.lock:
            user = self.get_user(store, user_id)
            user = store.users.update(user_id, is_banned=not user.is_banned)

        logger.info(f"User {user_id} banned={user.is_banned}")
        return user

    def delete_user(self, store: EntityStore, user_id: int) -> bool:
        """
        Delete a user and everything that references them.

        Removes the user's posts (with their likes and comments), every like
        and comment the user left on other posts, and every friend link the
        user is part of. Returns False without side effects if the user does
        not exist.
        """
        with store.lock:
            if not store.users.delete(user_id):
                return False

            for post in store.posts.filter(lambda p: p.user_id == user_id):
                post_service.delete_post(store, post.id)

            likes = store.likes.delete_where(lambda like: like.user_id == user_id)
            comments = store.comments.delete_where(lambda c: c.user_id == user_id)
            links = store.friendships.delete_where(lambda fs: fs.involves(user_id))

        logger.info(
            f"Deleted user {user_id} "
            f"({likes} likes, {comments} comments, {links} friend links)"
        )
        return True


user_service = UserService()
