"""
Posting domain: Pydantic V2 request/response schemas.
"""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _Base(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class PostOptions(_Base):
    background_color: str | None = Field(
        default=None, max_length=32, pattern=r"^#?[0-9A-Za-z]+$"
    )


class CreatePostRequest(_Base):
    content: str = Field(min_length=1, max_length=5000)
    options: PostOptions | None = None


class UpdatePostRequest(_Base):
    content: str | None = Field(default=None, min_length=1, max_length=5000)
    options: PostOptions | None = None


class PostResponse(BaseModel):
    """A post rendered for display; the author is a username, not an id."""

    id: uuid.UUID
    author: str
    content: str
    options: PostOptions
    created_at: datetime
    updated_at: datetime


class PostCreatedResponse(BaseModel):
    message: str
    post: PostResponse
