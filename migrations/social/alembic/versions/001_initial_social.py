"""Initial social schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

Tables created:
  - users                   Accounts: unique username, argon2 hash, RBAC roles
  - auth_sessions           One row per login (id = token `sid`)
  - posts                   Posts; each post is also a joinable event
  - friend_requests         Pending requests, one per unordered pair
  - friendships             Friendship edges, one per unordered pair
  - participations          (user, event) joins, one per pair
  - identity_verifications  One verification record per user

Enums are stored as VARCHAR (non-native) so no CREATE TYPE is needed.

Downgrade: drops all tables in reverse dependency order.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _ts(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=nullable)


# ─────────────────────────────────────────────────────────────────────────────
#  UPGRADE
# ─────────────────────────────────────────────────────────────────────────────

def upgrade() -> None:
    # ── 1. users ──────────────────────────────────────────────────────────────
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("roles", sa.JSON(), nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    # ── 2. auth_sessions ─────────────────────────────────────────────────────
    op.create_table(
        "auth_sessions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _ts("created_at"),
        _ts("expires_at"),
    )
    op.create_index("ix_auth_sessions_user_id", "auth_sessions", ["user_id"])

    # ── 3. posts ──────────────────────────────────────────────────────────────
    op.create_table(
        "posts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("author_id", sa.Uuid(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("background_color", sa.String(32), nullable=True),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_posts_created_at", "posts", ["created_at"])

    # ── 4. friend_requests ───────────────────────────────────────────────────
    op.create_table(
        "friend_requests",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("requester_id", sa.Uuid(), nullable=False),
        sa.Column("recipient_id", sa.Uuid(), nullable=False),
        sa.Column("pair_low_id", sa.Uuid(), nullable=False),
        sa.Column("pair_high_id", sa.Uuid(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        _ts("created_at"),
        sa.UniqueConstraint("pair_low_id", "pair_high_id", name="uq_friend_requests_pair"),
        sa.CheckConstraint("requester_id != recipient_id", name="ck_friend_requests_no_self"),
    )
    op.create_index("idx_friend_requests_requester_id", "friend_requests", ["requester_id"])
    op.create_index("idx_friend_requests_recipient_id", "friend_requests", ["recipient_id"])

    # ── 5. friendships ───────────────────────────────────────────────────────
    op.create_table(
        "friendships",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_low_id", sa.Uuid(), nullable=False),
        sa.Column("user_high_id", sa.Uuid(), nullable=False),
        _ts("created_at"),
        sa.UniqueConstraint("user_low_id", "user_high_id", name="uq_friendships_pair"),
        sa.CheckConstraint("user_low_id != user_high_id", name="ck_friendships_no_self"),
    )
    op.create_index("idx_friendships_user_low_id", "friendships", ["user_low_id"])
    op.create_index("idx_friendships_user_high_id", "friendships", ["user_high_id"])

    # ── 6. participations ────────────────────────────────────────────────────
    op.create_table(
        "participations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("activity_id", sa.Uuid(), nullable=False),
        _ts("created_at"),
        sa.UniqueConstraint("user_id", "activity_id", name="uq_participations_user_activity"),
    )
    op.create_index("idx_participations_user_id", "participations", ["user_id"])
    op.create_index("idx_participations_activity_id", "participations", ["activity_id"])

    # ── 7. identity_verifications ────────────────────────────────────────────
    op.create_table(
        "identity_verifications",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False, unique=True),
        sa.Column("method", sa.String(20), nullable=False),
        sa.Column("data", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        _ts("submitted_at"),
        _ts("reviewed_at", nullable=True),
        sa.Column("reviewed_by", sa.Uuid(), nullable=True),
    )
    op.create_index("idx_identity_verifications_status", "identity_verifications", ["status"])


# ─────────────────────────────────────────────────────────────────────────────
#  DOWNGRADE
# ─────────────────────────────────────────────────────────────────────────────

def downgrade() -> None:
    op.drop_table("identity_verifications")
    op.drop_table("participations")
    op.drop_table("friendships")
    op.drop_table("friend_requests")
    op.drop_table("posts")
    op.drop_table("auth_sessions")
    op.drop_table("users")
