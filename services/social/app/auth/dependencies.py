"""
Social service: auth-specific FastAPI dependencies.

The shared dependencies only decode the bearer token.  These add the session
check: a token whose session row was ended (logout, account deletion) or has
expired is rejected even though its signature is still valid.
"""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import service as svc
from app.database import get_db
from app.exceptions import AdminRequired, AlreadyLoggedIn, SessionExpired
from shared.auth.dependencies import (
    get_current_user_optional,
    get_current_user_required,
)
from shared.constants import Role
from shared.models.user import CurrentUser


async def get_current_user(
    current_user: CurrentUser = Depends(get_current_user_required),
    session: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """Resolve the logged-in user; 401 unless the session is still active."""
    active = await svc.get_active_session(session, current_user.session_id, current_user.id)
    if active is None:
        raise SessionExpired()
    return current_user


async def require_logged_out(
    current_user: CurrentUser | None = Depends(get_current_user_optional),
    session: AsyncSession = Depends(get_db),
) -> None:
    """Raise 403 when the caller already holds an active session."""
    if current_user is None:
        return
    if await svc.get_active_session(session, current_user.session_id, current_user.id):
        raise AlreadyLoggedIn()


def require_admin(
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """Raise 403 unless the authenticated user holds the ADMIN role."""
    if not current_user.has_role(Role.ADMIN):
        raise AdminRequired()
    return current_user
