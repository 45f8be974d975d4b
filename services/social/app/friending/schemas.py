"""
Friending domain: Pydantic V2 response schemas.

Requests carry usernames in the path only, so there are no request bodies.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.friending.constants import FriendRequestStatus


class FriendRequestItem(BaseModel):
    """A pending request rendered with usernames instead of account ids."""

    model_config = ConfigDict(populate_by_name=True)

    from_username: str = Field(alias="from")
    to_username: str = Field(alias="to")
    status: FriendRequestStatus
    created_at: datetime
