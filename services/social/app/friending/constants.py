"""
Friending domain: enums.
"""
from __future__ import annotations

import enum


class FriendRequestStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
