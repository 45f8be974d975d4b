"""
Posting domain: routes.

Routes:
  GET    /posts?author=   All posts, or one author's posts
  POST   /posts           Create a post (verified users only)
  PATCH  /posts/{id}      Edit my post
  DELETE /posts/{id}      Delete my post
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.database import get_db
from app.posting import controller as ctrl
from app.posting.schemas import (
    CreatePostRequest,
    PostCreatedResponse,
    PostResponse,
    UpdatePostRequest,
)
from shared.models.user import CurrentUser

router = APIRouter(prefix="/posts", tags=["posting"])


@router.get("", response_model=list[PostResponse], summary="List posts")
async def list_posts(
    author: str | None = Query(default=None, description="Only posts by this username"),
    session: AsyncSession = Depends(get_db),
) -> list[PostResponse]:
    return await ctrl.list_posts(session, author)


@router.post(
    "",
    response_model=PostCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
)
async def create_post(
    body: CreatePostRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> PostCreatedResponse:
    return await ctrl.create_post(session, current_user.id, body)


@router.patch("/{post_id}", summary="Edit a post")
async def update_post(
    post_id: uuid.UUID,
    body: UpdatePostRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.update_post(session, current_user.id, post_id, body)


@router.delete("/{post_id}", summary="Delete a post")
async def delete_post(
    post_id: uuid.UUID,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> dict:
    return await ctrl.delete_post(session, current_user.id, post_id)
