"""
Social features models - Friends and friend requests
"""
from enum import Enum
from app.models.base import Record


class FriendStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Friendship(Record):
    """Friend request between two users, symmetric once accepted"""

    # Requester
    user_id: int
    # Recipient
    friend_id: int

    status: FriendStatus = FriendStatus.PENDING

    def involves(self, user_id: int) -> bool:
        return user_id in (self.user_id, self.friend_id)

    def other_party(self, user_id: int) -> int:
        """Id of whichever side of the link is not ``user_id``"""
        return self.friend_id if self.user_id == user_id else self.user_id
