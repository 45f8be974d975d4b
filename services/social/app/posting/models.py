"""
Posting domain: SQLAlchemy ORM models.

Tables:
  posts  user posts; a post's id doubles as the id of the event people join
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from shared.database.postgres import Base


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    # Soft reference - users belong to the accounts concept
    author_id: Mapped[uuid.UUID] = mapped_column(sa.Uuid(as_uuid=True), nullable=False)
    content: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    # Display option, e.g. "#ffcc00"
    background_color: Mapped[str | None] = mapped_column(sa.String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now, onupdate=_now
    )

    __table_args__ = (
        sa.Index("idx_posts_author_id", "author_id"),
        sa.Index("idx_posts_created_at", "created_at"),
    )
