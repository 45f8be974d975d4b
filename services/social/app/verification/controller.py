"""
Identity verification: request orchestration.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.verification import service as svc
from app.verification.schemas import (
    MessageResponse,
    SubmitVerificationRequest,
    VerificationStatusResponse,
)

logger = logging.getLogger(__name__)


async def submit(
    session: AsyncSession, user_id: uuid.UUID, body: SubmitVerificationRequest
) -> MessageResponse:
    await svc.submit_verification(session, user_id, body.data)
    logger.info("Verification submitted by %s", user_id)
    return MessageResponse(message="Verification submitted successfully.")


async def get_status(
    session: AsyncSession, user_id: uuid.UUID
) -> VerificationStatusResponse:
    status = await svc.get_verification_status(session, user_id)
    return VerificationStatusResponse(status=status)


async def approve(
    session: AsyncSession, user_id: uuid.UUID, reviewer_id: uuid.UUID
) -> MessageResponse:
    await svc.approve_verification(session, user_id, reviewer_id)
    logger.info("Verification for %s approved by %s", user_id, reviewer_id)
    return MessageResponse(message="Verification approved successfully.")


async def reject(
    session: AsyncSession, user_id: uuid.UUID, reviewer_id: uuid.UUID
) -> MessageResponse:
    await svc.reject_verification(session, user_id, reviewer_id)
    logger.info("Verification for %s rejected by %s", user_id, reviewer_id)
    return MessageResponse(message="Verification rejected.")
