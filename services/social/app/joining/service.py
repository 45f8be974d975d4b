"""
Joining domain: pure business logic (zero FastAPI imports).

A user joins an activity at most once.  A repeated join is an error
(AlreadyJoined), never a silent no-op, and so is leaving an activity that was
never joined (ParticipationNotFound).

Activity existence is NOT checked here: the caller confirms it against the
posting service before calling join_activity.
"""
from __future__ import annotations

import logging
import uuid

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AlreadyJoined, ParticipationNotFound
from app.joining.models import Participation

logger = logging.getLogger(__name__)


async def _participation_exists(
    session: AsyncSession, user_id: uuid.UUID, activity_id: uuid.UUID
) -> bool:
    result = await session.execute(
        sa.select(sa.exists().where(
            Participation.user_id == user_id,
            Participation.activity_id == activity_id,
        ))
    )
    return result.scalar_one()


async def join_activity(
    session: AsyncSession,
    user_id: uuid.UUID,
    activity_id: uuid.UUID,
) -> Participation:
    if await _participation_exists(session, user_id, activity_id):
        raise AlreadyJoined()
    participation = Participation(user_id=user_id, activity_id=activity_id)
    session.add(participation)
    try:
        await session.flush()
    except IntegrityError as exc:
        # A concurrent join for the same pair committed first
        await session.rollback()
        logger.warning("Duplicate join of %s by %s rejected by constraint", activity_id, user_id)
        raise AlreadyJoined() from exc
    return participation


async def leave_activity(
    session: AsyncSession,
    user_id: uuid.UUID,
    activity_id: uuid.UUID,
) -> None:
    result = await session.execute(
        sa.delete(Participation).where(
            Participation.user_id == user_id,
            Participation.activity_id == activity_id,
        )
    )
    if result.rowcount == 0:
        raise ParticipationNotFound()


async def get_participants(
    session: AsyncSession, activity_id: uuid.UUID
) -> list[uuid.UUID]:
    result = await session.execute(
        sa.select(Participation.user_id)
        .where(Participation.activity_id == activity_id)
        .order_by(Participation.created_at.asc())
    )
    return list(result.scalars().all())


async def get_activities_for_user(
    session: AsyncSession, user_id: uuid.UUID
) -> list[uuid.UUID]:
    result = await session.execute(
        sa.select(Participation.activity_id)
        .where(Participation.user_id == user_id)
        .order_by(Participation.created_at.asc())
    )
    return list(result.scalars().all())
