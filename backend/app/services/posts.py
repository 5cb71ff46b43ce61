"""Posts Service — CRUD against the hosted `posts` table.

Invariants:
    - Lists are newest first (created_at DESC) with an exact total count
    - get/update on a missing id raise ResourceNotFoundError
    - delete on a missing id is not an error (returns False)
    - Any SQLAlchemyError is rolled back and re-raised as DatabaseError
"""

import logging
from contextlib import asynccontextmanager
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DatabaseError, ResourceNotFoundError
from app.models.post import Post
from app.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _db_operation(db: AsyncSession, operation: str):
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Posts {operation} failed: {e}", extra={"operation": operation},
        )
        raise DatabaseError(str(e.__class__.__name__), operation) from e


async def list_posts(
    db: AsyncSession, limit: int = 10, offset: int = 0,
) -> tuple[list[Post], int]:
    async with _db_operation(db, "list"):
        total = (await db.execute(select(func.count()).select_from(Post))).scalar_one()
        result = await db.execute(
            select(Post)
            .order_by(Post.created_at.desc(), Post.id)
            .limit(limit)
            .offset(offset),
        )
        return list(result.scalars().all()), total


async def get_post(db: AsyncSession, post_id: UUID) -> Post:
    async with _db_operation(db, "select"):
        post = await db.get(Post, post_id)
    if post is None:
        raise ResourceNotFoundError("Post", str(post_id))
    return post


async def create_post(db: AsyncSession, body: PostCreate) -> Post:
    async with _db_operation(db, "insert"):
        post = Post(**body.model_dump())
        db.add(post)
        await db.commit()
        await db.refresh(post)
    logger.info("Post created", extra={"post_id": str(post.id)})
    return post


async def update_post(db: AsyncSession, body: PostUpdate) -> Post:
    post = await get_post(db, body.id)
    changes = body.changes()
    if not changes:
        return post
    async with _db_operation(db, "update"):
        for name, value in changes.items():
            setattr(post, name, value)
        await db.commit()
        await db.refresh(post)
    logger.info("Post updated", extra={"post_id": str(post.id)})
    return post


async def delete_post(db: AsyncSession, post_id: UUID) -> bool:
    async with _db_operation(db, "delete"):
        result = await db.execute(delete(Post).where(Post.id == post_id))
        await db.commit()
    deleted = result.rowcount > 0
    logger.info(
        "Post deleted" if deleted else "Post delete matched no rows",
        extra={"post_id": str(post_id)},
    )
    return deleted
