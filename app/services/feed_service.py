"""
Feed service - assembles the personalised post feed
"""
from typing import Set

from app.database import EntityStore
from app.schemas.post import FeedResponse, PostWithAuthor
from app.services.post_service import author_of, newest_first, post_service
from app.services.social_service import social_service


class FeedService:
    """Builds a viewer's feed from their own posts and their friends' posts"""

    def get_eligible_author_ids(self, store: EntityStore, viewer_id: int) -> Set[int]:
        """Viewer plus everyone with an accepted friend link to them"""
        author_ids = set(social_service.get_friend_ids(store, viewer_id))
        author_ids.add(viewer_id)
        return author_ids

    def get_feed(self, store: EntityStore, viewer_id: int) -> FeedResponse:
        """
        Reverse-chronological feed for viewer_id.

        Each post carries its author, total like count, whether the viewer
        liked it, and its comments (oldest first) with their authors. A post
        or comment whose author no longer exists raises ConsistencyFault.
        """
        with store.lock:
            author_ids = self.get_eligible_author_ids(store, viewer_id)
            posts = newest_first(store.posts.filter(lambda p: p.user_id in author_ids))

            entries = []
            for post in posts:
                entries.append(PostWithAuthor(
                    id=post.id,
                    user_id=post.user_id,
                    content=post.content,
                    created_at=post.created_at,
                    author=author_of(store, post.user_id, f"Post {post.id}"),
                    likes=post_service.get_like_count(store, post.id),
                    liked=post_service.has_liked(store, viewer_id, post.id),
                    comments=post_service.get_comments(store, post.id)
                ))

        return FeedResponse(posts=entries, total_count=len(entries))


feed_service = FeedService()
