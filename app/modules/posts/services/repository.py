"""
Persistence adapter consumed by the posts and comments routers.

PostRepository is the contract every storage backend implements. All methods
are coroutines; any exception they raise is treated by the routers as a
storage fault. SQLAlchemyPostRepository is the backend shipped with the app.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional
import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.modules.posts.schemas.post import Post as PostSchema, PostWrite
from app.modules.posts.comments.schemas.comment import Comment as CommentSchema
from app.modules.posts.services.post import (
    get_post, get_posts, create_post, update_post, delete_post
)
from app.modules.posts.comments.services.comment import get_comments_by_post

logger = logging.getLogger("app")


class PersistenceError(Exception):
    """Raised when the underlying storage fails"""


class PostRepository(ABC):

    @abstractmethod
    async def find_all(self) -> List[PostSchema]:
        ...

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[PostSchema]:
        ...

    @abstractmethod
    async def insert(self, post_in: PostWrite) -> PostSchema:
        ...

    @abstractmethod
    async def update(self, post_id: str, post_in: PostWrite) -> Optional[PostSchema]:
        ...

    @abstractmethod
    async def remove(self, post_id: str) -> Optional[PostSchema]:
        """Delete a post and return the removed record"""

    @abstractmethod
    async def find_comments(self, post_id: str) -> Optional[List[CommentSchema]]:
        """
        Return the comments of a post.
        None means the post does not exist; an empty list means it has no comments.
        """


def _to_post(post) -> Optional[PostSchema]:
    return PostSchema.model_validate(post) if post else None


class SQLAlchemyPostRepository(PostRepository):
    """
    Runs each call in its own session on the threadpool, so the event loop
    never blocks on the database.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self.session_factory = session_factory

    async def _run(self, operation: Callable, *args):
        return await run_in_threadpool(self._call, operation, *args)

    def _call(self, operation: Callable, *args):
        db = self.session_factory()
        try:
            return operation(db, *args)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error in {operation.__name__}: {str(e)}")
            raise PersistenceError(str(e)) from e
        finally:
            db.close()

    async def find_all(self) -> List[PostSchema]:
        return await self._run(_find_all)

    async def find_by_id(self, post_id: str) -> Optional[PostSchema]:
        return await self._run(_find_by_id, post_id)

    async def insert(self, post_in: PostWrite) -> PostSchema:
        return await self._run(_insert, post_in)

    async def update(self, post_id: str, post_in: PostWrite) -> Optional[PostSchema]:
        return await self._run(_update, post_id, post_in)

    async def remove(self, post_id: str) -> Optional[PostSchema]:
        return await self._run(_remove, post_id)

    async def find_comments(self, post_id: str) -> Optional[List[CommentSchema]]:
        return await self._run(_find_comments, post_id)


# Rows are converted to schemas while the session is still open

def _find_all(db: Session) -> List[PostSchema]:
    return [PostSchema.model_validate(post) for post in get_posts(db)]

def _find_by_id(db: Session, post_id: str) -> Optional[PostSchema]:
    return _to_post(get_post(db, post_id))

def _insert(db: Session, post_in: PostWrite) -> PostSchema:
    return PostSchema.model_validate(create_post(db, post_in))

def _update(db: Session, post_id: str, post_in: PostWrite) -> Optional[PostSchema]:
    return _to_post(update_post(db, post_id, post_in))

def _remove(db: Session, post_id: str) -> Optional[PostSchema]:
    return _to_post(delete_post(db, post_id))

def _find_comments(db: Session, post_id: str) -> Optional[List[CommentSchema]]:
    if not get_post(db, post_id):
        return None
    return [CommentSchema.model_validate(c) for c in get_comments_by_post(db, post_id)]
