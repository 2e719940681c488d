"""
Admin API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core.schemas import MAX_ID, TrimmedModel


class AdminRequest(TrimmedModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=8, max_length=128)
    email: str = Field(..., min_length=3, max_length=320)
    phone_number: str = Field(..., min_length=1, max_length=30)
    role_id: int = Field(..., ge=1, le=MAX_ID)


class AdminResponse(BaseModel):
    # The password is never part of a response.
    id: int
    username: str
    email: str
    phone_number: str
    status: bool
    role_id: int
    role_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AdminRoleResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
