"""Admin operations: secret check, user listing, ban and role changes."""

import logging
import secrets
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from fullbright.core.database import storage_errors
from fullbright.core.errors import (
    AdminAuthError,
    InvalidValueError,
    MissingFieldError,
    UnknownUserError,
)
from fullbright.models import User

if TYPE_CHECKING:
    from fullbright.core.config import Settings

logger = logging.getLogger(__name__)

ROLE_MAX_LEN = 32


def check_admin_secret(supplied: str | None, settings: "Settings") -> None:
    """Raise AdminAuthError unless supplied equals ADMIN_PASSWORD exactly (no-op when admin auth is off)."""
    if not settings.ADMIN_AUTH_ENABLED:
        return
    expected = settings.ADMIN_PASSWORD.get_secret_value() if settings.ADMIN_PASSWORD else ""
    if not expected or supplied is None:
        raise AdminAuthError()
    if not secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        raise AdminAuthError()


def list_users(db: Session) -> list[User]:
    with storage_errors(db, "list users"):
        return db.query(User).order_by(User.id).all()


def get_user(db: Session, username: str | None = None, user_id: int | None = None) -> User:
    """Look a user up by id (preferred when given) or username."""
    if user_id is None and (username is None or not username.strip()):
        raise MissingFieldError("username")
    with storage_errors(db, "get user"):
        query = db.query(User)
        if user_id is not None:
            user = query.filter(User.id == user_id).first()
        else:
            user = query.filter(User.username == username.strip()).first()
    if user is None:
        raise UnknownUserError()
    return user


def set_ban(db: Session, user: User, banned: bool | None = None) -> User:
    """Set the banned flag, or flip it when banned is None."""
    with storage_errors(db, "set ban"):
        username = user.username
        new_value = (not user.banned) if banned is None else banned
        user.banned = new_value
        db.commit()
    logger.info(
        "Ban flag changed",
        extra={"username": username, "banned": new_value},
    )
    return user


def set_role(db: Session, user: User, role: str | None) -> User:
    """Overwrite the role string (any role to any role)."""
    if role is None or not role.strip():
        raise MissingFieldError("role")
    role = role.strip()
    if len(role) > ROLE_MAX_LEN:
        raise InvalidValueError(f"Role must be at most {ROLE_MAX_LEN} characters")
    with storage_errors(db, "set role"):
        username = user.username
        user.role = role
        db.commit()
    logger.info("Role changed", extra={"username": username, "role": role})
    return user


def reset_hwid(db: Session, user: User) -> User:
    """Unbind the hardware id; the next login that supplies one binds it again."""
    with storage_errors(db, "reset hwid"):
        username = user.username
        user.hwid = None
        db.commit()
    logger.info("HWID reset", extra={"username": username})
    return user
