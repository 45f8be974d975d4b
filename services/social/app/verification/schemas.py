"""
Identity verification: Pydantic V2 request/response schemas.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SubmitVerificationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    data: str = Field(min_length=1, max_length=2000, description="Government ID reference")


class VerificationStatusResponse(BaseModel):
    status: str = Field(description="unverified | pending | approved | rejected")


class MessageResponse(BaseModel):
    message: str
