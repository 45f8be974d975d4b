"""
Accounts/sessions: request orchestration layer.

Receives validated input from the router, calls service functions and builds
the response models.  No business logic here.
"""
from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import service as svc
from app.auth.schemas import (
    CredentialsRequest,
    MessageResponse,
    TokenResponse,
    UpdatePasswordRequest,
    UpdateUsernameRequest,
    UserCreatedResponse,
    UserResponse,
)
from app.config import Settings
from app.exceptions import UserNotFound
from shared.models.user import CurrentUser

logger = logging.getLogger(__name__)


async def create_user(
    session: AsyncSession,
    body: CredentialsRequest,
) -> UserCreatedResponse:
    user = await svc.register_user(session, body.username, body.password)
    logger.info("Registered user %s", user.id)
    return UserCreatedResponse(
        message="Created user successfully!",
        user=UserResponse.model_validate(user),
    )


async def login(
    session: AsyncSession,
    body: CredentialsRequest,
    settings: Settings,
) -> TokenResponse:
    user = await svc.authenticate_user(session, body.username, body.password)
    auth_session = await svc.create_session(
        session, user.id, expire_seconds=settings.jwt_expire_seconds
    )
    token = svc.create_access_token(
        user_id=user.id,
        username=user.username,
        roles=list(user.roles),
        session_id=auth_session.id,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_seconds=settings.jwt_expire_seconds,
    )
    return TokenResponse(
        message="Logged in!",
        access_token=token,
        expires_in=settings.jwt_expire_seconds,
        user=UserResponse.model_validate(user),
    )


async def logout(session: AsyncSession, current_user: CurrentUser) -> MessageResponse:
    await svc.end_session(session, current_user.session_id)
    return MessageResponse(message="Logged out!")


async def get_session_user(
    session: AsyncSession, current_user: CurrentUser
) -> UserResponse:
    user = await svc.get_user_by_id(session, current_user.id)
    if user is None:
        raise UserNotFound()
    return UserResponse.model_validate(user)


async def list_users(session: AsyncSession) -> list[UserResponse]:
    users = await svc.list_users(session)
    return [UserResponse.model_validate(u) for u in users]


async def get_user(session: AsyncSession, username: str) -> UserResponse:
    user = await svc.get_user_by_username(session, username)
    return UserResponse.model_validate(user)


async def update_username(
    session: AsyncSession,
    user_id: uuid.UUID,
    body: UpdateUsernameRequest,
) -> MessageResponse:
    await svc.update_username(session, user_id, body.username)
    return MessageResponse(message="Username updated successfully!")


async def update_password(
    session: AsyncSession,
    user_id: uuid.UUID,
    body: UpdatePasswordRequest,
) -> MessageResponse:
    await svc.update_password(session, user_id, body.current_password, body.new_password)
    return MessageResponse(message="Password updated successfully!")


async def delete_user(
    session: AsyncSession, current_user: CurrentUser
) -> MessageResponse:
    # End the caller's session first, then the account (which ends the rest)
    await svc.end_session(session, current_user.session_id)
    await svc.delete_user(session, current_user.id)
    logger.info("Deleted user %s", current_user.id)
    return MessageResponse(message="User deleted!")
