"""Registration and HWID-bound login."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fullbright.core.database import storage_errors
from fullbright.core.errors import (
    HardwareMismatchError,
    MissingFieldError,
    UnknownUserError,
    UserBannedError,
    UsernameTakenError,
)
from fullbright.core.tokens import issue_token
from fullbright.models import User

if TYPE_CHECKING:
    from fullbright.core.config import Settings

logger = logging.getLogger(__name__)


def clean_field(value: str | None, field: str, required: bool) -> str | None:
    """Strip a request field; blank counts as absent. Raises MissingFieldError when required."""
    if value is None or not value.strip():
        if required:
            raise MissingFieldError(field)
        return None
    return value.strip()


def find_user(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def _new_user(
    db: Session,
    settings: "Settings",
    username: str,
    hwid: str | None,
    ip: str | None,
    now: datetime,
) -> User:
    role = settings.DEFAULT_ROLE
    user = User(
        username=username,
        hwid=hwid,
        role=role,
        banned=False,
        last_ip=ip,
        token=issue_token(settings, username, hwid, role, now=now),
    )
    db.add(user)
    db.flush()
    return user


def register(
    db: Session,
    settings: "Settings",
    username: str | None,
    hwid: str | None,
    ip: str | None = None,
    now: datetime | None = None,
) -> User:
    """
    Create a new account bound to hwid and return it with its first token.

    Raises UsernameTakenError if the username exists, including when a concurrent
    request inserts it first (unique constraint).
    """
    name = clean_field(username, "username", required=True)
    hwid = clean_field(hwid, "hwid", required=settings.REQUIRE_HWID)
    now = now or datetime.now(UTC)

    with storage_errors(db, "register"):
        if find_user(db, name) is not None:
            logger.info("Registration rejected", extra={"username": name, "reason": "taken"})
            raise UsernameTakenError(name)
        try:
            user = _new_user(db, settings, name, hwid, ip, now)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.info("Registration rejected", extra={"username": name, "reason": "taken"})
            raise UsernameTakenError(name) from e

    logger.info("User registered", extra={"username": name, "ip": ip})
    return user


def check_can_login(user: User, hwid: str | None, settings: "Settings") -> None:
    """Raise if the account may not authenticate with this hwid. Ban is checked first."""
    if user.banned:
        raise UserBannedError()
    if (
        settings.ENFORCE_HWID_BINDING
        and user.hwid is not None
        and hwid is not None
        and user.hwid != hwid
    ):
        raise HardwareMismatchError()


def login(
    db: Session,
    settings: "Settings",
    username: str | None,
    hwid: str | None,
    ip: str | None = None,
    now: datetime | None = None,
) -> User:
    """
    Authenticate username (+ hwid) and return the user with a token set.

    Unknown usernames are created when AUTO_REGISTER_ON_LOGIN is on, otherwise
    UnknownUserError. A user without a bound hwid is bound to the supplied one.
    """
    name = clean_field(username, "username", required=True)
    hwid = clean_field(hwid, "hwid", required=settings.REQUIRE_HWID)
    now = now or datetime.now(UTC)

    with storage_errors(db, "login"):
        user = find_user(db, name)
        if user is None:
            if not settings.AUTO_REGISTER_ON_LOGIN:
                logger.info("Login rejected", extra={"username": name, "reason": "unknown"})
                raise UnknownUserError()
            try:
                user = _new_user(db, settings, name, hwid, ip, now)
                user.last_login = now
                db.commit()
                logger.info("User auto-registered on login", extra={"username": name, "ip": ip})
                return user
            except IntegrityError:
                # Lost the insert race; continue against the row that won.
                db.rollback()
                user = find_user(db, name)
                if user is None:
                    raise

        try:
            check_can_login(user, hwid, settings)
        except (UserBannedError, HardwareMismatchError) as e:
            logger.warning(
                "Login rejected",
                extra={"username": name, "reason": e.message, "ip": ip},
            )
            raise

        if user.hwid is None and hwid is not None:
            user.hwid = hwid
        user.last_login = now
        user.last_ip = ip
        user.token = issue_token(
            settings, user.username, hwid, user.role, existing=user.token, now=now
        )
        db.commit()

    logger.info("Login succeeded", extra={"username": name, "ip": ip})
    return user
