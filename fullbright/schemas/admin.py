"""Schemas for the admin listing and mutation endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """User row as shown to admins (token omitted)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    hwid: str | None
    role: str
    banned: bool
    created_at: datetime | None = None
    last_login: datetime | None
    last_ip: str | None


class UserSelector(BaseModel):
    """Identify a user by username or by id."""

    username: str | None = Field(default=None, max_length=255)
    id: int | None = None


class BanRequest(UserSelector):
    """Omit banned to flip the current flag."""

    banned: bool | None = None


class RoleRequest(UserSelector):
    role: str | None = Field(default=None, description="New role, e.g. VIP")
