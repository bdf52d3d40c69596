"""Registration and HWID-bound login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fullbright.api.dependencies import get_app_settings, get_client_ip
from fullbright.core.config import Settings
from fullbright.core.database import get_db
from fullbright.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from fullbright.services import accounts

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    ip: Annotated[str | None, Depends(get_client_ip)],
) -> TokenResponse:
    """
    Create an account bound to the given hardware id.
    Returns 409 if the username is already registered.
    """
    user = accounts.register(db, settings, body.username, body.hwid, ip=ip)
    return TokenResponse(token=user.token, role=user.role)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    ip: Annotated[str | None, Depends(get_client_ip)],
) -> TokenResponse:
    """
    Authenticate with username and hardware id; returns a bearer token and the role.

    403 with status 'banned' for banned accounts, 403 with status 'denied' when the
    hardware id does not match the bound one, 404 for unknown users unless
    auto-registration is enabled.
    """
    user = accounts.login(db, settings, body.username, body.hwid, ip=ip)
    return TokenResponse(token=user.token, role=user.role)
