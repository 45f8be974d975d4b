"""
Identity verification: enums.
"""
from __future__ import annotations

import enum


class VerificationStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VerificationMethod(str, enum.Enum):
    GOVERNMENT_ID = "government_id"


# Reported by the status endpoint when the user never submitted anything
UNVERIFIED = "unverified"
