"""
Joining domain: Pydantic V2 response schemas.

Event listings reuse the posting schemas: an event is a post.
"""
from __future__ import annotations

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str
