"""Request/response schemas for /register and /login."""

from typing import Literal

from pydantic import BaseModel, Field

# Presence is checked by the accounts service so a missing field yields 400, not 422.


class RegisterRequest(BaseModel):
    """Registration body: username plus the hardware id to bind."""

    username: str | None = Field(default=None, max_length=255, description="Username")
    hwid: str | None = Field(default=None, max_length=255, description="Hardware id")


class LoginRequest(BaseModel):
    """Login body; hwid may be optional depending on REQUIRE_HWID."""

    username: str | None = Field(default=None, max_length=255, description="Username")
    hwid: str | None = Field(default=None, max_length=255, description="Hardware id")


class TokenResponse(BaseModel):
    """Returned after a successful login or registration."""

    status: Literal["ok"] = "ok"
    token: str = Field(..., description="Opaque bearer token")
    role: str = Field(..., description="Account role, e.g. USER or VIP")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    status: Literal["error", "denied", "banned"]
    message: str
