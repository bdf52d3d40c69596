"""Pydantic request/response schemas."""

from fullbright.schemas.admin import BanRequest, RoleRequest, UserRecord, UserSelector
from fullbright.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from fullbright.schemas.health import PingResponse

__all__ = [
    "BanRequest",
    "ErrorResponse",
    "LoginRequest",
    "PingResponse",
    "RegisterRequest",
    "RoleRequest",
    "TokenResponse",
    "UserRecord",
    "UserSelector",
]
