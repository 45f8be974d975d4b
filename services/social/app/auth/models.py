"""
Social service: SQLAlchemy ORM models for the accounts/sessions domain.

Tables owned by this module:
  - users           Accounts: unique username, argon2 password hash, RBAC roles
  - auth_sessions   One row per login; the id travels in the access token as `sid`
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from shared.constants import Role
from shared.database.postgres import Base

from app.auth.constants import USERNAME_MAX_LENGTH


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _default_roles() -> list[str]:
    return [Role.USER.value]


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    # Human-chosen handle; the only identifier clients ever see
    username: Mapped[str] = mapped_column(
        sa.String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True
    )
    password_hash: Mapped[str] = mapped_column(sa.String(255), nullable=False)
    # JSON list of shared.constants.Role values
    roles: Mapped[list[str]] = mapped_column(
        sa.JSON(), nullable=False, default=_default_roles
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now, onupdate=_now
    )


class AuthSession(Base):
    __tablename__ = "auth_sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )
    expires_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False
    )
