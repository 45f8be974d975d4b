"""
Social service: accounts and sessions business logic.

This module is the Identity Directory for the rest of the service: it is the
only place that maps usernames to account ids (resolve_username) and back
(ids_to_usernames).  Other concepts hold account ids only.

Transaction contract: functions flush() but never commit(); the get_db
dependency commits once per request.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from jose import jwt
from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.constants import DELETED_USER_PLACEHOLDER, SESSION_EXPIRE_SECONDS
from app.auth.models import AuthSession, User
from app.auth.utils import hash_password, verify_password
from app.exceptions import (
    InvalidCredentials,
    InvalidUsername,
    UserNotFound,
    UsernameAlreadyExists,
)
from shared.constants import Role

logger = logging.getLogger(__name__)


# ── User queries ──────────────────────────────────────────────────────────────

async def get_user_by_id(
    session: AsyncSession, user_id: uuid.UUID
) -> User | None:
    result = await session.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_username(session: AsyncSession, username: str) -> User:
    """Load a user by username; raise 404 if absent."""
    result = await session.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None:
        raise UserNotFound(username)
    return user


async def list_users(session: AsyncSession) -> list[User]:
    result = await session.execute(select(User).order_by(User.username))
    return list(result.scalars().all())


async def resolve_username(session: AsyncSession, username: str) -> uuid.UUID:
    """Translate a human-facing username into an account id."""
    result = await session.execute(select(User.id).where(User.username == username))
    user_id = result.scalar_one_or_none()
    if user_id is None:
        raise UserNotFound(username)
    return user_id


async def ids_to_usernames(
    session: AsyncSession, user_ids: Iterable[uuid.UUID]
) -> dict[uuid.UUID, str]:
    """Return {id: username} for the ids that still have an account.

    Ids without an account are simply absent from the mapping; callers decide
    how to render them.
    """
    ids = set(user_ids)
    if not ids:
        return {}
    result = await session.execute(
        select(User.id, User.username).where(User.id.in_(ids))
    )
    return {row.id: row.username for row in result.all()}


async def usernames_for(
    session: AsyncSession, user_ids: list[uuid.UUID]
) -> list[str]:
    """Render ids as usernames, preserving order; missing accounts become a placeholder."""
    mapping = await ids_to_usernames(session, user_ids)
    return [mapping.get(uid, DELETED_USER_PLACEHOLDER) for uid in user_ids]


# ── Registration / profile updates ────────────────────────────────────────────

def _validate_username(username: str) -> None:
    if not username or any(ch.isspace() for ch in username):
        raise InvalidUsername()


async def _assert_username_unique(session: AsyncSession, username: str) -> None:
    result = await session.execute(
        select(exists().where(User.username == username))
    )
    if result.scalar_one():
        raise UsernameAlreadyExists(username)


async def _flush_username(session: AsyncSession, username: str) -> None:
    """Flush a new or renamed account; a concurrent claim of the name becomes a 409."""
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        logger.warning("Username %s claimed by a concurrent request", username)
        raise UsernameAlreadyExists(username) from exc


async def register_user(
    session: AsyncSession,
    username: str,
    password: str,
    *,
    roles: list[Role] | None = None,
) -> User:
    """Create an account.  Guard clauses first, happy path last."""
    _validate_username(username)
    await _assert_username_unique(session, username)
    user = User(
        username=username,
        password_hash=hash_password(password),
        roles=[r.value for r in (roles or [Role.USER])],
    )
    session.add(user)
    await _flush_username(session, username)
    return user


async def authenticate_user(
    session: AsyncSession,
    username: str,
    password: str,
) -> User:
    """Verify credentials; one generic error for unknown user and bad password."""
    result = await session.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    return user


async def update_username(
    session: AsyncSession, user_id: uuid.UUID, username: str
) -> User:
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise UserNotFound()
    if user.username == username:
        return user
    _validate_username(username)
    await _assert_username_unique(session, username)
    user.username = username
    await _flush_username(session, username)
    return user


async def update_password(
    session: AsyncSession,
    user_id: uuid.UUID,
    current_password: str,
    new_password: str,
) -> None:
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise UserNotFound()
    if not verify_password(current_password, user.password_hash):
        raise InvalidCredentials()
    user.password_hash = hash_password(new_password)
    await session.flush()


async def delete_user(session: AsyncSession, user_id: uuid.UUID) -> None:
    user = await get_user_by_id(session, user_id)
    if user is None:
        raise UserNotFound()
    await end_all_sessions(session, user_id)
    await session.delete(user)
    await session.flush()


# ── Sessions ──────────────────────────────────────────────────────────────────

async def create_session(
    session: AsyncSession,
    user_id: uuid.UUID,
    expire_seconds: int = SESSION_EXPIRE_SECONDS,
) -> AuthSession:
    now = datetime.now(timezone.utc)
    auth_session = AuthSession(
        user_id=user_id,
        created_at=now,
        expires_at=now + timedelta(seconds=expire_seconds),
    )
    session.add(auth_session)
    await session.flush()
    return auth_session


async def get_active_session(
    session: AsyncSession,
    session_id: uuid.UUID,
    user_id: uuid.UUID,
) -> AuthSession | None:
    result = await session.execute(
        select(AuthSession).where(
            AuthSession.id == session_id,
            AuthSession.user_id == user_id,
            AuthSession.expires_at > datetime.now(timezone.utc),
        )
    )
    return result.scalar_one_or_none()


async def end_session(session: AsyncSession, session_id: uuid.UUID) -> None:
    await session.execute(delete(AuthSession).where(AuthSession.id == session_id))


async def end_all_sessions(session: AsyncSession, user_id: uuid.UUID) -> None:
    await session.execute(delete(AuthSession).where(AuthSession.user_id == user_id))


# ── JWT access token ──────────────────────────────────────────────────────────

def create_access_token(
    user_id: uuid.UUID,
    username: str,
    roles: list[str],
    session_id: uuid.UUID,
    secret: str,
    algorithm: str,
    issuer: str,
    audience: str,
    expire_seconds: int = SESSION_EXPIRE_SECONDS,
) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "username": username,
        "roles": roles,
        "sid": str(session_id),
        "iat": now,
        "exp": now + timedelta(seconds=expire_seconds),
        "iss": issuer,
        "aud": audience,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)
