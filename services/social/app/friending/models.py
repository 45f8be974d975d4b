"""
Friending domain: SQLAlchemy ORM models.

Tables:
  friend_requests  pending requests only; accept/reject/withdraw delete the row
  friendships      symmetric friendship edges, one row per unordered pair

Both tables key the unordered pair as (low, high) so that a UNIQUE constraint
covers both directions: A→B and B→A map to the same key.  Account ids are soft
references; the users table belongs to the accounts concept.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from shared.database.postgres import Base
from app.friending.constants import FriendRequestStatus


def _now() -> datetime:
    return datetime.now(timezone.utc)


def ordered_pair(a: uuid.UUID, b: uuid.UUID) -> tuple[uuid.UUID, uuid.UUID]:
    """Return the (low, high) key for the unordered pair {a, b}."""
    return (a, b) if a < b else (b, a)


class FriendRequest(Base):
    __tablename__ = "friend_requests"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    requester_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    recipient_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    pair_low_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    pair_high_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    status: Mapped[FriendRequestStatus] = mapped_column(
        sa.Enum(
            FriendRequestStatus,
            name="friendrequeststatus",
            native_enum=False,
            length=20,
            values_callable=lambda e: [x.value for x in e],
        ),
        nullable=False,
        default=FriendRequestStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )

    __table_args__ = (
        sa.UniqueConstraint("pair_low_id", "pair_high_id", name="uq_friend_requests_pair"),
        sa.CheckConstraint("requester_id != recipient_id", name="ck_friend_requests_no_self"),
        sa.Index("idx_friend_requests_requester_id", "requester_id"),
        sa.Index("idx_friend_requests_recipient_id", "recipient_id"),
    )


class Friendship(Base):
    __tablename__ = "friendships"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_low_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    user_high_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )

    __table_args__ = (
        sa.UniqueConstraint("user_low_id", "user_high_id", name="uq_friendships_pair"),
        sa.CheckConstraint("user_low_id != user_high_id", name="ck_friendships_no_self"),
        sa.Index("idx_friendships_user_low_id", "user_low_id"),
        sa.Index("idx_friendships_user_high_id", "user_high_id"),
    )

    def other(self, user_id: uuid.UUID) -> uuid.UUID:
        return self.user_high_id if self.user_low_id == user_id else self.user_low_id
