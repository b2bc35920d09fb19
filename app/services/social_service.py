"""
Social service for managing friends and friend requests
"""
import logging
from typing import Optional, List

from app.core.exceptions import (
    ConsistencyFault,
    DuplicateRequestError,
    NotFoundError,
    SelfRequestError,
    UnknownUserError,
)
from app.database import EntityStore
from app.models.social import Friendship, FriendStatus
from app.schemas.social import (
    FriendWithUser,
    FriendListResponse,
    PendingRequestsResponse,
    FriendshipStatusResponse,
)
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class SocialService:
    """Service for social/friend operations"""

    def get_friend_request(
        self,
        store: EntityStore,
        user_id: int,
        other_user_id: int
    ) -> Optional[Friendship]:
        """Find the link between two users regardless of who sent it"""
        return store.friendships.first(
            lambda fs: (fs.user_id == user_id and fs.friend_id == other_user_id)
            or (fs.user_id == other_user_id and fs.friend_id == user_id)
        )

    def send_friend_request(
        self,
        store: EntityStore,
        user_id: int,
        friend_id: int
    ) -> Friendship:
        """
        Send a friend request from user_id to friend_id.

        Any existing link between the two users blocks a new request,
        including a rejected one.
        """
        with store.lock:
            if user_id == friend_id:
                raise SelfRequestError()

            if store.users.get(friend_id) is None:
                raise UnknownUserError()

            if self.get_friend_request(store, user_id, friend_id) is not None:
                raise DuplicateRequestError()

            friendship = store.friendships.insert(
                user_id=user_id,
                friend_id=friend_id,
                status=FriendStatus.PENDING
            )

        logger.info(f"Friend request {friendship.id} sent: {user_id} -> {friend_id}")
        return friendship

    def _set_status(
        self,
        store: EntityStore,
        request_id: int,
        status: FriendStatus
    ) -> Friendship:
        # No check on the current status: accepted and rejected links can move again
        friendship = store.friendships.update(request_id, status=status)
        if friendship is None:
            raise NotFoundError("Friend request not found")

        logger.info(f"Friend request {request_id} -> {status.value}")
        return friendship

    def accept_friend_request(self, store: EntityStore, request_id: int) -> Friendship:
        """Accept a friend request"""
        return self._set_status(store, request_id, FriendStatus.ACCEPTED)

    def reject_friend_request(self, store: EntityStore, request_id: int) -> Friendship:
        """Reject a friend request"""
        return self._set_status(store, request_id, FriendStatus.REJECTED)

    def _with_user(self, store: EntityStore, fs: Friendship, user_id: int) -> FriendWithUser:
        user = store.users.get(user_id)
        if user is None:
            raise ConsistencyFault(
                f"Friend link {fs.id} references missing user {user_id}"
            )
        return FriendWithUser(
            id=fs.id,
            user_id=fs.user_id,
            friend_id=fs.friend_id,
            status=fs.status,
            created_at=fs.created_at,
            user=UserResponse.model_validate(user)
        )

    def _accepted_links(self, store: EntityStore, user_id: int) -> List[Friendship]:
        return store.friendships.filter(
            lambda fs: fs.status == FriendStatus.ACCEPTED and fs.involves(user_id)
        )

    def get_friend_ids(self, store: EntityStore, user_id: int) -> List[int]:
        """Ids of everyone with an accepted link to user_id"""
        return [fs.other_party(user_id) for fs in self._accepted_links(store, user_id)]

    def get_friends(self, store: EntityStore, user_id: int) -> FriendListResponse:
        """Get list of friends"""
        with store.lock:
            friends = [
                self._with_user(store, fs, fs.other_party(user_id))
                for fs in self._accepted_links(store, user_id)
            ]

        return FriendListResponse(
            friends=friends,
            total_count=len(friends)
        )

    def get_pending_requests(
        self,
        store: EntityStore,
        user_id: int
    ) -> PendingRequestsResponse:
        """Get pending friend requests addressed to user_id"""
        with store.lock:
            incoming = store.friendships.filter(
                lambda fs: fs.friend_id == user_id and fs.status == FriendStatus.PENDING
            )
            requests = [self._with_user(store, fs, fs.user_id) for fs in incoming]

        return PendingRequestsResponse(
            requests=requests,
            total_count=len(requests)
        )

    def get_friendship_status(
        self,
        store: EntityStore,
        user_id: int,
        other_user_id: int
    ) -> FriendshipStatusResponse:
        """Describe the link (if any) between user_id and other_user_id"""
        fs = self.get_friend_request(store, user_id, other_user_id)
        if fs is None:
            return FriendshipStatusResponse(user_id=other_user_id, status="none")

        return FriendshipStatusResponse(
            user_id=other_user_id,
            status=fs.status.value,
            request_id=fs.id,
            is_requester=fs.user_id == user_id
        )

    def are_friends(self, store: EntityStore, user_id: int, other_user_id: int) -> bool:
        """Check if two users are friends"""
        fs = self.get_friend_request(store, user_id, other_user_id)
        return fs is not None and fs.status == FriendStatus.ACCEPTED

    def get_friend_count(self, store: EntityStore, user_id: int) -> int:
        """Get count of friends"""
        return store.friendships.count(
            lambda fs: fs.status == FriendStatus.ACCEPTED and fs.involves(user_id)
        )


social_service = SocialService()
