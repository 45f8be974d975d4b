"""
Identity verification: pure business logic (zero FastAPI imports).

Lifecycle of a user's record:
  (none) ──submit──► pending ──approve──► approved
                        │
                        └──reject──► rejected ──submit──► pending
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    AlreadyVerified,
    UserNotVerified,
    VerificationAlreadyPending,
    VerificationNotFound,
)
from app.verification.constants import UNVERIFIED, VerificationMethod, VerificationStatus
from app.verification.models import IdentityVerification

logger = logging.getLogger(__name__)


async def get_verification(
    session: AsyncSession, user_id: uuid.UUID
) -> IdentityVerification | None:
    result = await session.execute(
        sa.select(IdentityVerification).where(IdentityVerification.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def submit_verification(
    session: AsyncSession,
    user_id: uuid.UUID,
    data: str,
    method: VerificationMethod = VerificationMethod.GOVERNMENT_ID,
) -> IdentityVerification:
    record = await get_verification(session, user_id)
    if record is not None:
        if record.status == VerificationStatus.APPROVED:
            raise AlreadyVerified()
        if record.status == VerificationStatus.PENDING:
            raise VerificationAlreadyPending()
        # Rejected: resubmission reopens the same record
        record.method = method
        record.data = data
        record.status = VerificationStatus.PENDING
        record.submitted_at = datetime.now(timezone.utc)
        record.reviewed_at = None
        record.reviewed_by = None
        await session.flush()
        return record

    record = IdentityVerification(
        user_id=user_id,
        method=method,
        data=data,
        status=VerificationStatus.PENDING,
    )
    session.add(record)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Concurrent verification submission for user %s", user_id)
        raise VerificationAlreadyPending() from exc
    return record


async def get_verification_status(session: AsyncSession, user_id: uuid.UUID) -> str:
    record = await get_verification(session, user_id)
    if record is None:
        return UNVERIFIED
    return record.status.value


async def _review(
    session: AsyncSession,
    user_id: uuid.UUID,
    reviewer_id: uuid.UUID | None,
    outcome: VerificationStatus,
) -> IdentityVerification:
    record = await get_verification(session, user_id)
    if record is None or record.status != VerificationStatus.PENDING:
        raise VerificationNotFound()
    record.status = outcome
    record.reviewed_at = datetime.now(timezone.utc)
    record.reviewed_by = reviewer_id
    await session.flush()
    return record


async def approve_verification(
    session: AsyncSession,
    user_id: uuid.UUID,
    reviewer_id: uuid.UUID | None = None,
) -> IdentityVerification:
    return await _review(session, user_id, reviewer_id, VerificationStatus.APPROVED)


async def reject_verification(
    session: AsyncSession,
    user_id: uuid.UUID,
    reviewer_id: uuid.UUID | None = None,
) -> IdentityVerification:
    return await _review(session, user_id, reviewer_id, VerificationStatus.REJECTED)


async def assert_user_verified(session: AsyncSession, user_id: uuid.UUID) -> None:
    result = await session.execute(
        sa.select(
            sa.exists().where(
                IdentityVerification.user_id == user_id,
                IdentityVerification.status == VerificationStatus.APPROVED,
            )
        )
    )
    if not result.scalar_one():
        raise UserNotVerified()
