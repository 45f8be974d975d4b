"""
Identity verification: routes.

Routes:
  POST /verifications                  Submit a government-id verification
  GET  /verifications/status           My verification status
  PUT  /verifications/{user_id}/approve  Admin: approve a pending verification
  PUT  /verifications/{user_id}/reject   Admin: reject a pending verification
"""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user, require_admin
from app.database import get_db
from app.verification import controller as ctrl
from app.verification.schemas import (
    MessageResponse,
    SubmitVerificationRequest,
    VerificationStatusResponse,
)
from shared.models.user import CurrentUser

router = APIRouter(prefix="/verifications", tags=["verification"])


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit identity verification",
)
async def submit_verification(
    body: SubmitVerificationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.submit(session, current_user.id, body)


@router.get(
    "/status",
    response_model=VerificationStatusResponse,
    summary="Get my verification status",
)
async def get_verification_status(
    current_user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> VerificationStatusResponse:
    return await ctrl.get_status(session, current_user.id)


@router.put("/{user_id}/approve", response_model=MessageResponse, summary="Approve (admin)")
async def approve_verification(
    user_id: uuid.UUID,
    admin: CurrentUser = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.approve(session, user_id, admin.id)


@router.put("/{user_id}/reject", response_model=MessageResponse, summary="Reject (admin)")
async def reject_verification(
    user_id: uuid.UUID,
    admin: CurrentUser = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    return await ctrl.reject(session, user_id, admin.id)
