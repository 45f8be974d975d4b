"""
Joining domain: SQLAlchemy ORM models.

Tables:
  participations  one row per (user, activity) a user has joined

Both columns are soft references: users belong to the accounts concept and
activities (events) to the posting concept.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from shared.database.postgres import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Participation(Base):
    __tablename__ = "participations"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    activity_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )

    __table_args__ = (
        sa.UniqueConstraint("user_id", "activity_id", name="uq_participations_user_activity"),
        sa.Index("idx_participations_user_id", "user_id"),
        sa.Index("idx_participations_activity_id", "activity_id"),
    )
