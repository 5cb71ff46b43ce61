"""Data CRUD — /api/data over the hosted `posts` table.

Invariants:
    - GET with ?id returns one post (404 if absent); without it, a page of posts
    - Bodies are validated by Pydantic before reaching the handler (400 on failure)
    - limit/offset are only validated for the list view; a lookup by id ignores them
    - Handlers hold no logic beyond calling services/posts.py and wrapping in {"data": ...}
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.error_handlers import as_request_validation_error
from app.infrastructure.database import get_db
from app.schemas.post import (
    MessageResponse, PageParams, Pagination, PostCreate, PostDelete,
    PostEnvelope, PostListEnvelope, PostResponse, PostUpdate,
)
from app.services import posts

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/data", tags=["data"])


def _page_params(limit: str | None, offset: str | None) -> PageParams:
    raw = {"limit": limit, "offset": offset}
    try:
        return PageParams.model_validate({k: v for k, v in raw.items() if v is not None})
    except ValidationError as e:
        raise as_request_validation_error(e, "query")


@router.get("", response_model=PostEnvelope | PostListEnvelope)
async def read_posts(
    post_id: UUID | None = Query(None, alias="id", description="Fetch a single post by id"),
    limit: str | None = Query(None, description="Page size, 1-100 (default 10)"),
    offset: str | None = Query(None, description="Rows to skip (default 0)"),
    db: AsyncSession = Depends(get_db),
):
    """Fetch one post by id, or a newest-first page of posts."""
    if post_id is not None:
        post = await posts.get_post(db, post_id)
        return PostEnvelope(data=PostResponse.model_validate(post))

    page = _page_params(limit, offset)
    rows, total = await posts.list_posts(db, limit=page.limit, offset=page.offset)
    return PostListEnvelope(
        data=[PostResponse.model_validate(p) for p in rows],
        pagination=Pagination(total=total, limit=page.limit, offset=page.offset),
    )


@router.post(
    "", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_post(body: PostCreate, db: AsyncSession = Depends(get_db)):
    post = await posts.create_post(db, body)
    return PostEnvelope(data=PostResponse.model_validate(post))


@router.put("", response_model=PostEnvelope)
async def update_post(body: PostUpdate, db: AsyncSession = Depends(get_db)):
    post = await posts.update_post(db, body)
    return PostEnvelope(data=PostResponse.model_validate(post))


@router.delete("", response_model=MessageResponse)
async def delete_post(body: PostDelete, db: AsyncSession = Depends(get_db)):
    await posts.delete_post(db, body.id)
    return MessageResponse(message="Post deleted successfully")
