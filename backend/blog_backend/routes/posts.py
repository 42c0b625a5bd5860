"""
Blog Backend: Posts Route Handlers
====================================

What:  GET /api/posts, GET /api/posts/{post_id}, POST /api/posts.
How:   Each handler makes exactly one PostService call and returns its result.
       Failures propagate as StorageError and become HTTP 500 in main.py.
Who:   Called by the HTML views (through PostsClient) and any other HTTP client.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog_backend.database import get_db_session
from blog_backend.schemas.common import ErrorResponse
from blog_backend.schemas.post import PostCreate, PostResponse
from blog_backend.services.post_service import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Posts"])


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={
        500: {"description": "Storage call failed", "model": ErrorResponse},
    },
    summary="List all posts",
)
async def list_posts(
    db: AsyncSession = Depends(get_db_session),
) -> List[PostResponse]:
    """Every post, unfiltered and unpaginated. Empty array when there are none."""
    return await post_service.list_posts(db)


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={
        500: {"description": "Lookup failed or no such post", "model": ErrorResponse},
    },
    summary="Get a single post by ID",
)
async def get_post(
    post_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    """
    Single post by identifier.

    post_id is taken as a plain string so that a malformed identifier fails
    the storage lookup like any other bad id, instead of being rejected
    by request validation.
    """
    return await post_service.get_post(db, post_id)


@router.post(
    "/posts",
    status_code=201,
    response_model=PostResponse,
    responses={
        201: {"description": "Post created", "model": PostResponse},
        500: {"description": "Insert failed", "model": ErrorResponse},
    },
    summary="Create a post",
)
async def create_post(
    payload: PostCreate,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    """Insert {title, content} as-is and return the stored row."""
    return await post_service.create_post(db, payload)
