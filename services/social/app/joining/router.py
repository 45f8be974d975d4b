"""
Joining domain: routes.

Routes:
  POST   /events/{event_id}/join          Join an event
  DELETE /events/{event_id}/join          Leave an event
  GET    /events/{event_id}/participants  Usernames of everyone who joined
  GET    /users/{username}/events         Events a user has joined
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.database import get_db
from app.joining import controller as ctrl
from app.joining.schemas import MessageResponse
from app.posting.schemas import PostResponse
from shared.models.user import CurrentUser

router = APIRouter(tags=["joining"])


@router.post(
    "/events/{event_id}/join",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Join an event",
)
async def join_event(
    event_id: uuid.UUID,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.join_event(session, current_user.id, event_id)


@router.delete("/events/{event_id}/join", response_model=MessageResponse, summary="Leave an event")
async def leave_event(
    event_id: uuid.UUID,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.leave_event(session, current_user.id, event_id)


@router.get(
    "/events/{event_id}/participants",
    response_model=list[str],
    summary="List an event's participants",
)
async def list_participants(
    event_id: uuid.UUID,
    session: AsyncSession = Depends(get_db),
) -> list[str]:
    return await ctrl.list_participants(session, event_id)


@router.get(
    "/users/{username}/events",
    response_model=list[PostResponse],
    summary="List events a user has joined",
)
async def list_user_events(
    username: str,
    session: AsyncSession = Depends(get_db),
) -> list[PostResponse]:
    return await ctrl.list_user_events(session, username)
