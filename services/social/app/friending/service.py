"""
Friending domain: pure business logic (zero FastAPI imports).

Every function takes account ids, never usernames; resolving usernames is the
controller's job.

State rules:
  send:    not to self; not if already friends; not if a pending request
           exists between the pair in either direction
  accept:  only the recipient's side of a pending from→to request; creates the
           friendship and removes the request in the same unit of work
  reject:  same precondition as accept; removes the request, no friendship
  remove request:  the sender withdraws their own pending request
  remove friend:   absent edge is an error, not a no-op

Uniqueness is enforced twice: a pre-check read gives a typed error in the
common case, and the (low, high) UNIQUE constraints catch a concurrent request
that slipped past the pre-check.  Both paths raise the same exception.
"""
from __future__ import annotations

import logging
import uuid

import sqlalchemy as sa
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    AlreadyFriends,
    FriendNotFound,
    FriendRequestAlreadyExists,
    FriendRequestNotFound,
    InvalidFriendRequest,
)
from app.friending.constants import FriendRequestStatus
from app.friending.models import FriendRequest, Friendship, ordered_pair

logger = logging.getLogger(__name__)


# ── Internal helpers ───────────────────────────────────────────────────────────

async def _pending_request_between(
    session: AsyncSession, a: uuid.UUID, b: uuid.UUID
) -> FriendRequest | None:
    """Pending request in either direction."""
    low, high = ordered_pair(a, b)
    result = await session.execute(
        sa.select(FriendRequest).where(
            FriendRequest.pair_low_id == low,
            FriendRequest.pair_high_id == high,
        )
    )
    return result.scalar_one_or_none()


async def _pending_request_from(
    session: AsyncSession, from_id: uuid.UUID, to_id: uuid.UUID
) -> FriendRequest | None:
    result = await session.execute(
        sa.select(FriendRequest).where(
            FriendRequest.requester_id == from_id,
            FriendRequest.recipient_id == to_id,
        )
    )
    return result.scalar_one_or_none()


async def _delete_request(
    session: AsyncSession, from_id: uuid.UUID, to_id: uuid.UUID
) -> bool:
    """Delete the from→to request; False when another unit of work already removed it."""
    result = await session.execute(
        sa.delete(FriendRequest).where(
            FriendRequest.requester_id == from_id,
            FriendRequest.recipient_id == to_id,
        )
    )
    return result.rowcount > 0


async def _friendship_between(
    session: AsyncSession, a: uuid.UUID, b: uuid.UUID
) -> Friendship | None:
    low, high = ordered_pair(a, b)
    result = await session.execute(
        sa.select(Friendship).where(
            Friendship.user_low_id == low,
            Friendship.user_high_id == high,
        )
    )
    return result.scalar_one_or_none()


async def _flush_or_raise(session: AsyncSession, error: type[HTTPException]) -> None:
    """Flush pending writes; a unique-key violation becomes ``error``.

    The failed unit of work is rolled back so the request ends cleanly.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Unique constraint rejected a concurrent write: %s", error.__name__)
        raise error() from exc


# ── Read helpers ───────────────────────────────────────────────────────────────

async def are_friends(session: AsyncSession, a: uuid.UUID, b: uuid.UUID) -> bool:
    return await _friendship_between(session, a, b) is not None


async def assert_not_friends(session: AsyncSession, a: uuid.UUID, b: uuid.UUID) -> None:
    if await are_friends(session, a, b):
        raise AlreadyFriends()


# ── Requests ───────────────────────────────────────────────────────────────────

async def send_request(
    session: AsyncSession,
    from_id: uuid.UUID,
    to_id: uuid.UUID,
) -> FriendRequest:
    if from_id == to_id:
        raise InvalidFriendRequest()
    await assert_not_friends(session, from_id, to_id)
    if await _pending_request_between(session, from_id, to_id) is not None:
        raise FriendRequestAlreadyExists()
    low, high = ordered_pair(from_id, to_id)
    request = FriendRequest(
        requester_id=from_id,
        recipient_id=to_id,
        pair_low_id=low,
        pair_high_id=high,
        status=FriendRequestStatus.PENDING,
    )
    session.add(request)
    await _flush_or_raise(session, FriendRequestAlreadyExists)
    return request


async def remove_request(
    session: AsyncSession,
    from_id: uuid.UUID,
    to_id: uuid.UUID,
) -> None:
    """Withdraw the pending request ``from_id`` sent to ``to_id``."""
    if not await _delete_request(session, from_id, to_id):
        raise FriendRequestNotFound()


async def accept_request(
    session: AsyncSession,
    from_id: uuid.UUID,
    to_id: uuid.UUID,
) -> Friendship:
    request = await _pending_request_from(session, from_id, to_id)
    if request is None:
        raise FriendRequestNotFound()
    if not await _delete_request(session, from_id, to_id):
        raise FriendRequestNotFound()
    request.status = FriendRequestStatus.ACCEPTED
    low, high = ordered_pair(from_id, to_id)
    edge = Friendship(user_low_id=low, user_high_id=high)
    session.add(edge)
    await _flush_or_raise(session, AlreadyFriends)
    return edge


async def reject_request(
    session: AsyncSession,
    from_id: uuid.UUID,
    to_id: uuid.UUID,
) -> FriendRequest:
    request = await _pending_request_from(session, from_id, to_id)
    if request is None:
        raise FriendRequestNotFound()
    if not await _delete_request(session, from_id, to_id):
        raise FriendRequestNotFound()
    request.status = FriendRequestStatus.REJECTED
    return request


async def get_requests(session: AsyncSession, user_id: uuid.UUID) -> list[FriendRequest]:
    """Pending requests sent or received by ``user_id``, oldest first."""
    result = await session.execute(
        sa.select(FriendRequest)
        .where(
            sa.or_(
                FriendRequest.requester_id == user_id,
                FriendRequest.recipient_id == user_id,
            )
        )
        .order_by(FriendRequest.created_at.asc())
    )
    return list(result.scalars().all())


# ── Friends ────────────────────────────────────────────────────────────────────

async def remove_friend(
    session: AsyncSession,
    user_id: uuid.UUID,
    friend_id: uuid.UUID,
) -> None:
    low, high = ordered_pair(user_id, friend_id)
    result = await session.execute(
        sa.delete(Friendship).where(
            Friendship.user_low_id == low,
            Friendship.user_high_id == high,
        )
    )
    if result.rowcount == 0:
        raise FriendNotFound()


async def get_friends(session: AsyncSession, user_id: uuid.UUID) -> list[uuid.UUID]:
    result = await session.execute(
        sa.select(Friendship)
        .where(
            sa.or_(
                Friendship.user_low_id == user_id,
                Friendship.user_high_id == user_id,
            )
        )
        .order_by(Friendship.created_at.asc())
    )
    return [edge.other(user_id) for edge in result.scalars().all()]
