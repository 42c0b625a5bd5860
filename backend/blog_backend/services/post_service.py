"""
Blog Backend: Post Service
============================

What:  The three storage calls behind the posts API: list, get by id, insert.
How:   Each method performs exactly one statement on the session it is given
       and converts the row(s) into response models.
Who:   Called by the posts route handlers.

Error Handling:
    Every failure, whatever its cause, is re-raised as StorageError with the
    underlying message. A lookup that matches no row is one of those
    failures; there is no separate not-found path.
"""

import logging
from typing import List, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_backend.exceptions import StorageError
from blog_backend.models.post import Post
from blog_backend.schemas.post import PostCreate, PostResponse

logger = logging.getLogger(__name__)


def _raw_message(exc: Exception) -> str:
    """Driver-level message when SQLAlchemy wraps a DBAPI error, else str(exc)."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class PostService:
    """
    Stateless pass-through to the posts table.

    Responsibilities:
        - list_posts(): every row, unfiltered and unpaginated
        - get_post(): the single row with the given id
        - create_post(): insert one row and return it
    """

    async def list_posts(self, db: AsyncSession) -> List[PostResponse]:
        """
        Return all posts in storage order.

        Raises:
            StorageError: the query failed
        """
        try:
            result = await db.execute(select(Post))
            posts = result.scalars().all()
            return [PostResponse.model_validate(post) for post in posts]
        except Exception as e:
            logger.error("Storage error listing posts: %s", e, exc_info=True)
            raise StorageError(message=_raw_message(e), operation="list_posts") from e

    async def get_post(self, db: AsyncSession, post_id: Union[int, str]) -> PostResponse:
        """
        Return the post whose id equals post_id.

        The identifier arrives as the raw path segment. A value that is not an
        integer, an id with no matching row, and a failed query all raise the
        same StorageError.

        Args:
            db: Async database session
            post_id: Post identifier as received from the caller

        Raises:
            StorageError: no single row could be returned
        """
        try:
            result = await db.execute(select(Post).where(Post.id == int(post_id)))
            post = result.scalar_one()
            return PostResponse.model_validate(post)
        except Exception as e:
            logger.error("Storage error fetching post %s: %s", post_id, e)
            raise StorageError(
                message=_raw_message(e),
                operation="get_post",
                context={"post_id": str(post_id)},
            ) from e

    async def create_post(self, db: AsyncSession, payload: PostCreate) -> PostResponse:
        """
        Insert one post and return the stored row.

        The id and created_at are assigned during flush. The commit happens
        here, before the route returns, so a failed commit surfaces as
        StorageError instead of a 201 for a row that was never stored.

        Raises:
            StorageError: the insert or its commit failed (including NOT NULL violations)
        """
        try:
            post = Post(title=payload.title, content=payload.content)
            db.add(post)
            await db.flush()
            await db.commit()
            logger.info("Post %s created", post.id)
            return PostResponse.model_validate(post)
        except Exception as e:
            logger.error("Storage error creating post: %s", e)
            raise StorageError(message=_raw_message(e), operation="create_post") from e


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
