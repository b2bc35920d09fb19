"""
Domain errors raised by the store-backed services.

Services never translate these into HTTP responses themselves; the request
layer maps each kind to a status code (see ``app.main``).
"""


class SocialError(Exception):
    """Base class for every error a service can hand back to the caller"""

    code = "error"
    default_message = "Request could not be completed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(SocialError):
    """An id does not resolve to a stored record"""

    code = "not_found"
    default_message = "Resource not found"


class DuplicateRequestError(SocialError):
    """A friend link already exists for the pair, in any status or direction"""

    code = "duplicate_request"
    default_message = "Friend request already exists"


class SelfRequestError(SocialError):
    code = "self_request"
    default_message = "Cannot send friend request to yourself"


class UnknownUserError(SocialError):
    """A referenced user id does not exist"""

    code = "unknown_user"
    default_message = "User not found"


class ConsistencyFault(SocialError):
    """A stored row references a record that no longer exists"""

    code = "consistency_fault"
    default_message = "Data consistency fault"


class DuplicateUsernameError(SocialError):
    code = "duplicate_username"
    default_message = "Username already exists"


class AlreadyLikedError(SocialError):
    code = "already_liked"
    default_message = "Post already liked"


class InvalidCredentialsError(SocialError):
    code = "invalid_credentials"
    default_message = "Invalid username or password"


class UserBannedError(SocialError):
    code = "user_banned"
    default_message = "This account has been banned"


class ValidationError(SocialError):
    code = "validation_error"
    default_message = "Invalid input"
