"""
In-memory entity store and store-handle management for the Social Feed Backend
"""
import threading
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from fastapi import Request

from app.models import Comment, Friendship, Like, Post, Record, User
from app.utils.time_utils import utc_now

T = TypeVar("T", bound=Record)


class Table(Generic[T]):
    """
    Keyed collection of one record kind plus its id counter.

    Ids start at 1 and are never reused. Every record handed out is a copy,
    so callers cannot mutate stored rows behind the store's back.
    """

    def __init__(self, model: Type[T]):
        self.model = model
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def insert(self, **fields) -> T:
        """Assign the next id, stamp created_at and store the record"""
        record = self.model(id=self._next_id, created_at=utc_now(), **fields)
        self._rows[record.id] = record
        self._next_id += 1
        return record.model_copy()

    def get(self, record_id: int) -> Optional[T]:
        record = self._rows.get(record_id)
        return record.model_copy() if record is not None else None

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self._rows.values():
            if predicate(record):
                return record.model_copy()
        return None

    def filter(self, predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        """Snapshot of matching records in insertion order"""
        return [
            record.model_copy()
            for record in self._rows.values()
            if predicate is None or predicate(record)
        ]

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        if predicate is None:
            return len(self._rows)
        return sum(1 for record in self._rows.values() if predicate(record))

    def update(self, record_id: int, **changes) -> Optional[T]:
        """Merge ``changes`` into a stored record, returning the new version"""
        record = self._rows.get(record_id)
        if record is None:
            return None
        # id and created_at belong to the store
        changes.pop("id", None)
        changes.pop("created_at", None)
        updated = self.model.model_validate({**record.model_dump(), **changes})
        self._rows[record_id] = updated
        return updated.model_copy()

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        """Delete every matching record, returning how many were removed"""
        doomed = [record_id for record_id, record in self._rows.items() if predicate(record)]
        for record_id in doomed:
            del self._rows[record_id]
        return len(doomed)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, record_id: int) -> bool:
        return record_id in self._rows


class EntityStore:
    """
    The five entity tables of the application.

    Constructed once per process (see ``init_store``) and passed to services
    explicitly. ``lock`` must be held around any read-then-write sequence so
    uniqueness checks and cascades run as one critical section.
    """

    def __init__(self):
        self.users: Table[User] = Table(User)
        self.posts: Table[Post] = Table(Post)
        self.likes: Table[Like] = Table(Like)
        self.comments: Table[Comment] = Table(Comment)
        self.friendships: Table[Friendship] = Table(Friendship)
        self.lock = threading.RLock()

    def stats(self) -> Dict[str, int]:
        """Row count per table"""
        return {
            "users": len(self.users),
            "posts": len(self.posts),
            "likes": len(self.likes),
            "comments": len(self.comments),
            "friendships": len(self.friendships),
        }


def init_store() -> EntityStore:
    """Create the process-wide store"""
    return EntityStore()


def get_store(request: Request) -> EntityStore:
    """
    Dependency for getting the entity store in endpoints

    Usage in FastAPI endpoints:
        def my_endpoint(store: EntityStore = Depends(get_store)):
            ...
    """
    return request.app.state.store
