"""
Posting domain: pure business logic (zero FastAPI imports).

Also serves as the activity directory for joining: post_exists and
assert_post_exists answer "does this event exist?" without exposing the table.
"""
from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import EventNotFound, PostAuthorMismatch, PostNotFound
from app.posting.models import Post


async def create_post(
    session: AsyncSession,
    author_id: uuid.UUID,
    content: str,
    background_color: str | None = None,
) -> Post:
    post = Post(author_id=author_id, content=content, background_color=background_color)
    session.add(post)
    await session.flush()
    return post


async def get_post(session: AsyncSession, post_id: uuid.UUID) -> Post:
    result = await session.execute(sa.select(Post).where(Post.id == post_id))
    post = result.scalar_one_or_none()
    if post is None:
        raise PostNotFound()
    return post


async def get_posts(session: AsyncSession) -> list[Post]:
    """All posts, newest first."""
    result = await session.execute(sa.select(Post).order_by(Post.created_at.desc()))
    return list(result.scalars().all())


async def get_posts_by_author(session: AsyncSession, author_id: uuid.UUID) -> list[Post]:
    result = await session.execute(
        sa.select(Post)
        .where(Post.author_id == author_id)
        .order_by(Post.created_at.desc())
    )
    return list(result.scalars().all())


async def get_posts_by_ids(
    session: AsyncSession, post_ids: list[uuid.UUID]
) -> list[Post]:
    if not post_ids:
        return []
    result = await session.execute(
        sa.select(Post)
        .where(Post.id.in_(post_ids))
        .order_by(Post.created_at.desc())
    )
    return list(result.scalars().all())


async def update_post(
    session: AsyncSession,
    post_id: uuid.UUID,
    content: str | None = None,
    background_color: str | None = None,
) -> Post:
    """Apply only the fields that were given."""
    post = await get_post(session, post_id)
    if content is not None:
        post.content = content
    if background_color is not None:
        post.background_color = background_color
    await session.flush()
    return post


async def delete_post(session: AsyncSession, post_id: uuid.UUID) -> None:
    result = await session.execute(sa.delete(Post).where(Post.id == post_id))
    if result.rowcount == 0:
        raise PostNotFound()


async def assert_author_is_user(
    session: AsyncSession, post_id: uuid.UUID, user_id: uuid.UUID
) -> None:
    post = await get_post(session, post_id)
    if post.author_id != user_id:
        raise PostAuthorMismatch()


# ── Activity directory ─────────────────────────────────────────────────────────

async def post_exists(session: AsyncSession, post_id: uuid.UUID) -> bool:
    result = await session.execute(sa.select(sa.exists().where(Post.id == post_id)))
    return result.scalar_one()


async def assert_post_exists(session: AsyncSession, post_id: uuid.UUID) -> None:
    """Raise EventNotFound unless the post (event) exists."""
    if not await post_exists(session, post_id):
        raise EventNotFound()
