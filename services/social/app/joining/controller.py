"""
Joining domain: request orchestration.

Synchronizations:
  join          the event must exist in the posting concept (404 otherwise)
  participants  participant ids are rendered as usernames
  user events   the username is resolved first; joined ids are loaded as posts
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import service as accounts
from app.joining import service as svc
from app.joining.schemas import MessageResponse
from app.posting import controller as posting_ctrl
from app.posting import service as posting
from app.posting.schemas import PostResponse

logger = logging.getLogger(__name__)


async def join_event(
    session: AsyncSession, user_id: uuid.UUID, event_id: uuid.UUID
) -> MessageResponse:
    await posting.assert_post_exists(session, event_id)
    await svc.join_activity(session, user_id, event_id)
    logger.info("User %s joined event %s", user_id, event_id)
    return MessageResponse(message="Successfully joined the event.")


async def leave_event(
    session: AsyncSession, user_id: uuid.UUID, event_id: uuid.UUID
) -> MessageResponse:
    await svc.leave_activity(session, user_id, event_id)
    logger.info("User %s left event %s", user_id, event_id)
    return MessageResponse(message="Successfully left the event.")


async def list_participants(session: AsyncSession, event_id: uuid.UUID) -> list[str]:
    participant_ids = await svc.get_participants(session, event_id)
    return await accounts.usernames_for(session, participant_ids)


async def list_user_events(session: AsyncSession, username: str) -> list[PostResponse]:
    user_id = await accounts.resolve_username(session, username)
    event_ids = await svc.get_activities_for_user(session, user_id)
    # Events deleted after being joined simply drop out of the listing
    events = await posting.get_posts_by_ids(session, event_ids)
    return await posting_ctrl.render_posts(session, events)
