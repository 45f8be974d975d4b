"""
Identity verification: SQLAlchemy ORM models.

Tables:
  identity_verifications  at most one record per user; a rejected record is
                          reused when the user resubmits
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from shared.database.postgres import Base
from app.verification.constants import VerificationMethod, VerificationStatus


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _enum(cls: type, name: str) -> sa.Enum:
    return sa.Enum(
        cls,
        name=name,
        native_enum=False,
        length=20,
        values_callable=lambda e: [x.value for x in e],
    )


class IdentityVerification(Base):
    __tablename__ = "identity_verifications"

    id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        sa.Uuid(as_uuid=True), nullable=False, unique=True
    )
    method: Mapped[VerificationMethod] = mapped_column(
        _enum(VerificationMethod, "verificationmethod"),
        nullable=False,
        default=VerificationMethod.GOVERNMENT_ID,
    )
    # Opaque document reference supplied by the user
    data: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    status: Mapped[VerificationStatus] = mapped_column(
        _enum(VerificationStatus, "verificationstatus"),
        nullable=False,
        default=VerificationStatus.PENDING,
    )
    submitted_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(
        sa.DateTime(timezone=True), nullable=True
    )
    reviewed_by: Mapped[uuid.UUID | None] = mapped_column(
        sa.Uuid(as_uuid=True), nullable=True
    )

    __table_args__ = (
        sa.Index("idx_identity_verifications_status", "status"),
    )
