"""
Posting domain: request orchestration.

Synchronizations:
  create  the author must hold an approved identity verification
  update  the caller must be the post's author
  delete  the caller must be the post's author
  list    an ``author`` filter is resolved to an account id first
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import service as accounts
from app.posting import service as svc
from app.posting.models import Post
from app.posting.schemas import (
    CreatePostRequest,
    PostCreatedResponse,
    PostOptions,
    PostResponse,
    UpdatePostRequest,
)
from app.verification import service as verification

logger = logging.getLogger(__name__)


async def render_posts(session: AsyncSession, posts: list[Post]) -> list[PostResponse]:
    """Swap author ids for usernames."""
    names = await accounts.usernames_for(session, [p.author_id for p in posts])
    return [
        PostResponse(
            id=post.id,
            author=name,
            content=post.content,
            options=PostOptions(background_color=post.background_color),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
        for post, name in zip(posts, names)
    ]


async def list_posts(session: AsyncSession, author: str | None) -> list[PostResponse]:
    if author is None:
        posts = await svc.get_posts(session)
    else:
        author_id = await accounts.resolve_username(session, author)
        posts = await svc.get_posts_by_author(session, author_id)
    return await render_posts(session, posts)


async def create_post(
    session: AsyncSession,
    user_id: uuid.UUID,
    body: CreatePostRequest,
) -> PostCreatedResponse:
    await verification.assert_user_verified(session, user_id)
    color = body.options.background_color if body.options else None
    post = await svc.create_post(session, user_id, body.content, color)
    logger.info("Post %s created by %s", post.id, user_id)
    rendered = await render_posts(session, [post])
    return PostCreatedResponse(message="Created post successfully!", post=rendered[0])


async def update_post(
    session: AsyncSession,
    user_id: uuid.UUID,
    post_id: uuid.UUID,
    body: UpdatePostRequest,
) -> dict:
    await svc.assert_author_is_user(session, post_id, user_id)
    color = body.options.background_color if body.options else None
    await svc.update_post(session, post_id, body.content, color)
    return {"message": "Updated post successfully!"}


async def delete_post(
    session: AsyncSession,
    user_id: uuid.UUID,
    post_id: uuid.UUID,
) -> dict:
    await svc.assert_author_is_user(session, post_id, user_id)
    await svc.delete_post(session, post_id)
    logger.info("Post %s deleted by %s", post_id, user_id)
    return {"message": "Deleted post successfully!"}
