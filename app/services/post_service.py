"""
Post service for posts, likes and comments
"""
import logging
from typing import List, Tuple

from app.core.exceptions import (
    AlreadyLikedError,
    ConsistencyFault,
    NotFoundError,
    UnknownUserError,
    ValidationError,
)
from app.database import EntityStore
from app.models.post import Comment, Like, Post
from app.schemas.post import AdminPostResponse, CommentWithAuthor
from app.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def newest_first(posts: List[Post]) -> List[Post]:
    """Sort posts by created_at descending, newer ids first on ties"""
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


def author_of(store: EntityStore, user_id: int, owner: str) -> UserResponse:
    """
    Public record of a row's author.

    Raises ConsistencyFault rather than inventing a placeholder when the
    author row is gone.
    """
    user = store.users.get(user_id)
    if user is None:
        raise ConsistencyFault(f"{owner} references missing user {user_id}")
    return UserResponse.model_validate(user)


class PostService:
    """Service for post, like and comment operations"""

    def create_post(self, store: EntityStore, user_id: int, content: str) -> Post:
        """Create a post owned by user_id"""
        if not content or not content.strip():
            raise ValidationError("Post content is required")

        with store.lock:
            if store.users.get(user_id) is None:
                raise UnknownUserError()
            post = store.posts.insert(user_id=user_id, content=content)

        logger.info(f"User {user_id} created post {post.id}")
        return post

    def get_post(self, store: EntityStore, post_id: int) -> Post:
        post = store.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def get_posts_by_user(self, store: EntityStore, user_id: int) -> List[Post]:
        """Get a user's posts, newest first"""
        return newest_first(store.posts.filter(lambda p: p.user_id == user_id))

    def get_all_posts_with_authors(self, store: EntityStore) -> List[AdminPostResponse]:
        """Every post with author and engagement counts (moderation view)"""
        with store.lock:
            results = []
            for post in newest_first(store.posts.filter()):
                results.append(AdminPostResponse(
                    id=post.id,
                    user_id=post.user_id,
                    content=post.content,
                    created_at=post.created_at,
                    author=author_of(store, post.user_id, f"Post {post.id}"),
                    likes_count=self.get_like_count(store, post.id),
                    comments_count=store.comments.count(lambda c: c.post_id == post.id)
                ))
        return results

    def delete_post(self, store: EntityStore, post_id: int) -> bool:
        """Delete a post with its likes and comments. False if absent."""
        with store.lock:
            if not store.posts.delete(post_id):
                return False
            likes = store.likes.delete_where(lambda like: like.post_id == post_id)
            comments = store.comments.delete_where(lambda c: c.post_id == post_id)

        logger.info(f"Deleted post {post_id} ({likes} likes, {comments} comments)")
        return True

    # Likes

    def get_like_count(self, store: EntityStore, post_id: int) -> int:
        return store.likes.count(lambda like: like.post_id == post_id)

    def has_liked(self, store: EntityStore, user_id: int, post_id: int) -> bool:
        return store.likes.first(
            lambda like: like.user_id == user_id and like.post_id == post_id
        ) is not None

    def like_post(self, store: EntityStore, user_id: int, post_id: int) -> Tuple[Like, int]:
        """
        Like a post.
        Returns: (like, like_count)
        """
        with store.lock:
            self.get_post(store, post_id)
            if self.has_liked(store, user_id, post_id):
                raise AlreadyLikedError()
            like = store.likes.insert(user_id=user_id, post_id=post_id)
            count = self.get_like_count(store, post_id)

        return like, count

    def unlike_post(self, store: EntityStore, user_id: int, post_id: int) -> int:
        """
        Remove user_id's like from a post, if there is one.
        Returns: like_count
        """
        with store.lock:
            self.get_post(store, post_id)
            store.likes.delete_where(
                lambda like: like.user_id == user_id and like.post_id == post_id
            )
            return self.get_like_count(store, post_id)

    # Comments

    def _comment_with_author(self, store: EntityStore, comment: Comment) -> CommentWithAuthor:
        return CommentWithAuthor(
            id=comment.id,
            user_id=comment.user_id,
            post_id=comment.post_id,
            content=comment.content,
            created_at=comment.created_at,
            author=author_of(store, comment.user_id, f"Comment {comment.id}")
        )

    def add_comment(
        self,
        store: EntityStore,
        user_id: int,
        post_id: int,
        content: str
    ) -> CommentWithAuthor:
        """Comment on a post"""
        if not content or not content.strip():
            raise ValidationError("Comment content is required")

        with store.lock:
            self.get_post(store, post_id)
            if store.users.get(user_id) is None:
                raise UnknownUserError()
            comment = store.comments.insert(user_id=user_id, post_id=post_id, content=content)
            return self._comment_with_author(store, comment)

    def get_comments(self, store: EntityStore, post_id: int) -> List[CommentWithAuthor]:
        """Comments on a post, oldest first, each with its author"""
        with store.lock:
            self.get_post(store, post_id)
            comments = sorted(
                store.comments.filter(lambda c: c.post_id == post_id),
                key=lambda c: (c.created_at, c.id)
            )
            return [self._comment_with_author(store, c) for c in comments]


post_service = PostService()
