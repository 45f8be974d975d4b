"""
Accounts/sessions: Pydantic V2 request/response schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from app.auth.constants import PASSWORD_MIN_LENGTH, USERNAME_MAX_LENGTH


class _Base(BaseModel):
    # Passwords are taken exactly as typed; only usernames are stripped
    model_config = ConfigDict(extra="forbid")


Username = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=USERNAME_MAX_LENGTH,
        pattern=r"^\S+$",
    ),
]


# ── Requests ──────────────────────────────────────────────────────────────────

class CredentialsRequest(_Base):
    """Body for both POST /users (sign-up) and POST /login."""

    username: Username
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=128)


class UpdateUsernameRequest(_Base):
    username: Username


class UpdatePasswordRequest(_Base):
    current_password: str = Field(min_length=1, max_length=128)
    new_password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=128)


# ── Responses ─────────────────────────────────────────────────────────────────

class UserResponse(BaseModel):
    """Public view of an account - never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    created_at: datetime


class UserCreatedResponse(BaseModel):
    message: str
    user: UserResponse


class TokenResponse(BaseModel):
    message: str
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
