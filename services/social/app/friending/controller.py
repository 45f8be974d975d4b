"""
Friending domain: request orchestration.

Synchronizations: every username in the path is resolved to an account id
through the accounts service before the friending service is called, and ids
coming back are rendered as usernames for display.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import service as accounts
from app.auth.constants import DELETED_USER_PLACEHOLDER
from app.friending import service as svc
from app.friending.schemas import FriendRequestItem

logger = logging.getLogger(__name__)


async def list_friends(session: AsyncSession, user_id: uuid.UUID) -> list[str]:
    friend_ids = await svc.get_friends(session, user_id)
    return await accounts.usernames_for(session, friend_ids)


async def remove_friend(
    session: AsyncSession,
    user_id: uuid.UUID,
    friend_username: str,
) -> dict:
    friend_id = await accounts.resolve_username(session, friend_username)
    await svc.remove_friend(session, user_id, friend_id)
    logger.info("Friendship %s <-> %s removed", user_id, friend_id)
    return {"message": "Unfriended!"}


async def list_requests(
    session: AsyncSession, user_id: uuid.UUID
) -> list[FriendRequestItem]:
    requests = await svc.get_requests(session, user_id)
    names = await accounts.ids_to_usernames(
        session,
        [r.requester_id for r in requests] + [r.recipient_id for r in requests],
    )
    return [
        FriendRequestItem(
            from_username=names.get(r.requester_id, DELETED_USER_PLACEHOLDER),
            to_username=names.get(r.recipient_id, DELETED_USER_PLACEHOLDER),
            status=r.status,
            created_at=r.created_at,
        )
        for r in requests
    ]


async def send_request(
    session: AsyncSession,
    user_id: uuid.UUID,
    to_username: str,
) -> dict:
    to_id = await accounts.resolve_username(session, to_username)
    await svc.send_request(session, user_id, to_id)
    logger.info("Friend request %s -> %s sent", user_id, to_id)
    return {"message": "Sent request!"}


async def remove_request(
    session: AsyncSession,
    user_id: uuid.UUID,
    to_username: str,
) -> dict:
    to_id = await accounts.resolve_username(session, to_username)
    await svc.remove_request(session, user_id, to_id)
    return {"message": "Removed request!"}


async def accept_request(
    session: AsyncSession,
    user_id: uuid.UUID,
    from_username: str,
) -> dict:
    # The logged-in user is the recipient; the path names the sender
    from_id = await accounts.resolve_username(session, from_username)
    await svc.accept_request(session, from_id, user_id)
    logger.info("Friend request %s -> %s accepted", from_id, user_id)
    return {"message": "Accepted request!"}


async def reject_request(
    session: AsyncSession,
    user_id: uuid.UUID,
    from_username: str,
) -> dict:
    from_id = await accounts.resolve_username(session, from_username)
    await svc.reject_request(session, from_id, user_id)
    logger.info("Friend request %s -> %s rejected", from_id, user_id)
    return {"message": "Rejected request!"}
